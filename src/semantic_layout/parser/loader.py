"""Loader for diagram graph documents.

Diagram graphs arrive as JSON, often wrapped in surrounding prose or a
fenced code block by whatever generated them. The loader extracts the
document, validates its structure and fills in defaults. Dangling node
references are left in place for the layout engine to report.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from semantic_layout.parser.model import (
    CONNECTION_STYLES,
    DIRECTIONS,
    IMPORTANCES,
    NOTE_POSITIONS,
    DiagramConnection,
    DiagramGraph,
    DiagramGroup,
    DiagramNode,
    DiagramNote,
)

logger = logging.getLogger(__name__)

# Fenced code block: ```json ... ``` or ``` ... ```
_CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```")
# Outermost brace span (greedy)
_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def load_diagram(path: str | Path) -> DiagramGraph:
    """Read and parse a diagram graph file."""
    return parse_diagram_json(Path(path).read_text())


def parse_diagram_json(text: str) -> DiagramGraph:
    """Extract a JSON diagram graph from ``text`` and parse it."""
    return parse_diagram(_extract_json(text))


def _extract_json(text: str) -> Any:
    """Decode the first JSON document found in ``text``.

    Tries a fenced code block, then the outermost ``{...}`` span, then the
    text trimmed to its first ``{`` and last ``}``.
    """
    candidates: list[str] = []
    block = _CODE_BLOCK_PATTERN.search(text)
    if block:
        candidates.append(block.group(1).strip())
    obj = _OBJECT_PATTERN.search(text)
    if obj:
        candidates.append(obj.group(0))
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start:end + 1].strip())

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            logger.debug("Candidate is not valid JSON: %.60s", candidate)

    snippet = text.strip()[:100]
    raise ValueError(f"Could not find a JSON diagram in input starting with: {snippet!r}")


def parse_diagram(data: Any) -> DiagramGraph:
    """Validate a decoded document and build a DiagramGraph."""
    if not isinstance(data, dict):
        raise ValueError("Diagram document must be a JSON object")

    direction = data.get("direction") or "LR"
    _check_choice("direction", direction, DIRECTIONS)

    raw_nodes = data.get("nodes")
    if not isinstance(raw_nodes, list) or not raw_nodes:
        raise ValueError("Diagram must have at least one node")

    graph = DiagramGraph(
        direction=direction,
        title=data.get("title") or None,
        title_emoji=data.get("titleEmoji") or None,
    )

    seen: set[str] = set()
    for raw in raw_nodes:
        node = _parse_node(raw)
        if node.id in seen:
            raise ValueError(f"Duplicate node ID: {node.id}")
        seen.add(node.id)
        graph.nodes.append(node)

    for raw in _as_list(data, "connections"):
        conn = _parse_connection(raw)
        if conn is not None:
            graph.connections.append(conn)

    for raw in _as_list(data, "groups"):
        graph.groups.append(_parse_group(raw))

    for raw in _as_list(data, "notes"):
        graph.notes.append(_parse_note(raw))

    return graph


def _as_list(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list")
    return value


def _check_choice(name: str, value: Any, choices: tuple[str, ...]) -> None:
    if value not in choices:
        raise ValueError(
            f"Invalid {name} {value!r}; expected one of {', '.join(choices)}"
        )


def _optional_int(name: str, value: Any) -> int | None:
    """Coerce a grid hint to int; whole floats are accepted."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{name} hint must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"{name} hint must be an integer, got {value!r}")


def _parse_node(raw: Any) -> DiagramNode:
    if not isinstance(raw, dict):
        raise ValueError("Every node must be an object")
    node_id = raw.get("id")
    if node_id is None or str(node_id) == "":
        raise ValueError('Every node must have an "id"')
    node_id = str(node_id)
    label = raw.get("label")
    if not label:
        raise ValueError(f'Node "{node_id}" missing required "label" field')

    importance = raw.get("importance") or "medium"
    _check_choice("importance", importance, IMPORTANCES)

    return DiagramNode(
        id=node_id,
        type=raw.get("type") or "process",
        label=str(label),
        emoji=raw.get("emoji"),
        description=raw.get("description"),
        semantic_color=raw.get("semanticColor"),
        importance=importance,
        row=_optional_int("row", raw.get("row")),
        column=_optional_int("column", raw.get("column")),
    )


def _parse_connection(raw: Any) -> DiagramConnection | None:
    if not isinstance(raw, dict):
        raise ValueError("Every connection must be an object")
    source, target = raw.get("from"), raw.get("to")
    if not source or not target:
        logger.warning("Dropping connection without both endpoints: %r", raw)
        return None

    style = raw.get("style") or "solid"
    _check_choice("connection style", style, CONNECTION_STYLES)

    return DiagramConnection(
        source=str(source),
        target=str(target),
        style=style,
        label=raw.get("label"),
        semantic_color=raw.get("semanticColor"),
    )


def _parse_group(raw: Any) -> DiagramGroup:
    if not isinstance(raw, dict):
        raise ValueError("Every group must be an object")
    group_id = raw.get("id")
    if not group_id:
        raise ValueError('Every group must have an "id"')
    node_ids = raw.get("nodeIds") or []
    if not isinstance(node_ids, list):
        raise ValueError(f"Group '{group_id}' nodeIds must be a list")

    return DiagramGroup(
        id=str(group_id),
        label=str(raw.get("label") or group_id),
        node_ids=[str(nid) for nid in node_ids],
        emoji=raw.get("emoji"),
        semantic_color=raw.get("semanticColor"),
    )


def _parse_note(raw: Any) -> DiagramNote:
    if not isinstance(raw, dict):
        raise ValueError("Every note must be an object")
    position = raw.get("position")
    if position is not None:
        _check_choice("note position", position, NOTE_POSITIONS)
    attached = raw.get("attachedTo")

    return DiagramNote(
        text=str(raw.get("text") or ""),
        emoji=raw.get("emoji"),
        attached_to=str(attached) if attached else None,
        position=position,
    )
