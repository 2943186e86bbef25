"""Serialize a PositionedGraph to the camelCase JSON wire format."""

from __future__ import annotations

import json
from typing import Any

from semantic_layout.parser.model import (
    PositionedConnection,
    PositionedGraph,
    PositionedGroup,
    PositionedNode,
    PositionedNote,
)


def _drop_none(d: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}


def _node_dict(node: PositionedNode) -> dict[str, Any]:
    return _drop_none({
        "id": node.id,
        "type": node.type,
        "label": node.label,
        "emoji": node.emoji,
        "description": node.description,
        "semanticColor": node.semantic_color,
        "importance": node.importance,
        "row": node.row,
        "column": node.column,
        "rank": node.rank,
        "x": node.x,
        "y": node.y,
        "width": node.width,
        "height": node.height,
    })


def _connection_dict(conn: PositionedConnection) -> dict[str, Any]:
    return _drop_none({
        "from": conn.source,
        "to": conn.target,
        "style": conn.style,
        "label": conn.label,
        "semanticColor": conn.semantic_color,
        "fromX": conn.from_x,
        "fromY": conn.from_y,
        "toX": conn.to_x,
        "toY": conn.to_y,
        "fromSide": conn.from_side.value,
        "toSide": conn.to_side.value,
        "points": [[x, y] for x, y in conn.points],
    })


def _group_dict(group: PositionedGroup) -> dict[str, Any]:
    return _drop_none({
        "id": group.id,
        "label": group.label,
        "emoji": group.emoji,
        "nodeIds": list(group.node_ids),
        "semanticColor": group.semantic_color,
        "x": group.x,
        "y": group.y,
        "width": group.width,
        "height": group.height,
    })


def _note_dict(note: PositionedNote) -> dict[str, Any]:
    return _drop_none({
        "text": note.text,
        "emoji": note.emoji,
        "attachedTo": note.attached_to,
        "position": note.position,
        "x": note.x,
        "y": note.y,
        "width": note.width,
        "height": note.height,
    })


def positioned_to_dict(graph: PositionedGraph) -> dict[str, Any]:
    """Return a JSON-compatible dict for ``graph``."""
    result: dict[str, Any] = {"direction": graph.direction}
    if graph.title is not None:
        result["title"] = _drop_none({
            "text": graph.title.text,
            "emoji": graph.title.emoji,
            "x": graph.title.x,
            "y": graph.title.y,
        })
    result["nodes"] = [_node_dict(n) for n in graph.nodes]
    result["connections"] = [_connection_dict(c) for c in graph.connections]
    result["groups"] = [_group_dict(g) for g in graph.groups]
    result["notes"] = [_note_dict(n) for n in graph.notes]
    result["diagnostics"] = [
        {"kind": d.kind.value, "message": d.message, "subject": d.subject}
        for d in graph.diagnostics
    ]
    return result


def render_json(graph: PositionedGraph, indent: int | None = 2) -> str:
    """Render ``graph`` as a JSON string."""
    return json.dumps(positioned_to_dict(graph), indent=indent, ensure_ascii=False)
