"""Layout coordinator: ranking, snake wrapping, grid mapping, then placement.

Pipeline: DiagramGraph -> ranks -> (snake if LR) -> grid -> {routing, groups,
notes, title} -> PositionedGraph. The input graph is never modified.
"""

from __future__ import annotations

import logging

from semantic_layout.layout.config import DEFAULT_CONFIG, LayoutConfig
from semantic_layout.layout.grid import grid_extent, position_nodes
from semantic_layout.layout.groups import position_group
from semantic_layout.layout.notes import place_notes
from semantic_layout.layout.ranks import assign_ranks
from semantic_layout.layout.routing import route_connections
from semantic_layout.layout.snake import wrap_chain
from semantic_layout.layout.title import position_title
from semantic_layout.parser.model import (
    Diagnostic,
    DiagnosticKind,
    DiagramConnection,
    DiagramGraph,
    DiagramGroup,
    DiagramNote,
    PositionedGraph,
    PositionedGroup,
    PositionedNode,
)

logger = logging.getLogger(__name__)


def compute_layout(
    graph: DiagramGraph,
    config: LayoutConfig | None = None,
) -> PositionedGraph:
    """Compute positions and sizes for every element of ``graph``.

    Never raises on structurally valid input: dangling references, empty
    groups and blank notes are dropped and reported in
    ``PositionedGraph.diagnostics``.
    """
    config = config or DEFAULT_CONFIG
    diagnostics: list[Diagnostic] = []

    connections = _filter_connections(graph, diagnostics)

    ranking = assign_ranks(graph.nodes, connections, graph.direction)
    for source, target in ranking.broken_edges:
        diagnostics.append(Diagnostic(
            DiagnosticKind.CYCLE_BROKEN,
            f"Connection {source} -> {target} closes a cycle; "
            "ignored for ranking",
            subject=f"{source}->{target}",
        ))

    cells = ranking.cells
    if graph.direction == "LR" and connections:
        cells, reason = wrap_chain(graph.nodes, connections, cells)
        if reason:
            logger.debug("Snake layout skipped: %s", reason)
            diagnostics.append(Diagnostic(
                DiagnosticKind.SNAKE_FALLBACK,
                f"Snake layout skipped: {reason}",
            ))

    nodes = position_nodes(graph.nodes, cells, ranking.ranks, config)
    node_map = {node.id: node for node in nodes}
    max_row, max_col = grid_extent(nodes)

    routed = route_connections(nodes, connections, graph.direction)
    groups = _position_groups(graph.groups, node_map, config, diagnostics)
    notes = place_notes(
        _filter_notes(graph.notes, diagnostics),
        node_map,
        max_row,
        max_col,
        config,
    )
    title = position_title(graph.title, max_col, config, emoji=graph.title_emoji)

    logger.debug(
        "Laid out %d nodes, %d connections, %d groups, %d notes (%d diagnostics)",
        len(nodes), len(routed), len(groups), len(notes), len(diagnostics),
    )

    return PositionedGraph(
        direction=graph.direction,
        title=title,
        nodes=nodes,
        connections=routed,
        groups=groups,
        notes=notes,
        diagnostics=diagnostics,
    )


def _filter_connections(
    graph: DiagramGraph,
    diagnostics: list[Diagnostic],
) -> list[DiagramConnection]:
    """Drop connections whose endpoints are not nodes of the graph."""
    ids = set(graph.node_ids())
    valid = []
    for conn in graph.connections:
        missing = [nid for nid in (conn.source, conn.target) if nid not in ids]
        if not missing:
            valid.append(conn)
            continue
        message = (
            f"Connection {conn.source} -> {conn.target} references missing "
            f"node {', '.join(repr(m) for m in missing)}"
        )
        logger.warning(message)
        diagnostics.append(Diagnostic(
            DiagnosticKind.INVALID_REFERENCE,
            message,
            subject=f"{conn.source}->{conn.target}",
        ))
    return valid


def _position_groups(
    groups: list[DiagramGroup],
    node_map: dict[str, PositionedNode],
    config: LayoutConfig,
    diagnostics: list[Diagnostic],
) -> list[PositionedGroup]:
    positioned = []
    for group in groups:
        for nid in group.node_ids:
            if nid not in node_map:
                message = f"Group '{group.id}' references missing node '{nid}'"
                logger.warning(message)
                diagnostics.append(Diagnostic(
                    DiagnosticKind.INVALID_REFERENCE, message, subject=group.id
                ))

        placed = position_group(group, node_map, config)
        if placed is None:
            message = f"Group '{group.id}' has no valid members; dropped"
            logger.warning(message)
            diagnostics.append(Diagnostic(
                DiagnosticKind.DEGENERATE_GROUP, message, subject=group.id
            ))
            continue
        positioned.append(placed)
    return positioned


def _filter_notes(
    notes: list[DiagramNote],
    diagnostics: list[Diagnostic],
) -> list[DiagramNote]:
    """Drop notes with blank text."""
    kept = []
    for i, note in enumerate(notes):
        if note.text and note.text.strip():
            kept.append(note)
            continue
        message = f"Note #{i} has no text; dropped"
        logger.warning(message)
        diagnostics.append(Diagnostic(
            DiagnosticKind.EMPTY_NOTE, message, subject=str(i)
        ))
    return kept
