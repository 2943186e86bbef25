"""Tests for the layout engine."""

import copy
import dataclasses

from semantic_layout.layout.config import DEFAULT_CONFIG
from semantic_layout.layout.engine import compute_layout
from semantic_layout.parser.model import (
    DiagnosticKind,
    DiagramConnection,
    DiagramGraph,
    DiagramGroup,
    DiagramNode,
    DiagramNote,
)
from semantic_layout.render.export import positioned_to_dict


def _node(nid, label=None, **kwargs):
    return DiagramNode(id=nid, type="process", label=label or nid.upper(), **kwargs)


def _make_simple_graph():
    return DiagramGraph(
        direction="TB",
        nodes=[
            DiagramNode(id="a", type="service", label="API"),
            DiagramNode(id="b", type="database", label="DB"),
        ],
        connections=[DiagramConnection(source="a", target="b", style="solid")],
    )


def _make_dag():
    edges = [
        ("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"),
        ("a", "d"), ("d", "e"), ("c", "f"), ("f", "e"),
    ]
    return DiagramGraph(
        direction="TB",
        nodes=[_node(n) for n in "abcdef"],
        connections=[DiagramConnection(s, t) for s, t in edges],
    )


def _kinds(result):
    return [d.kind for d in result.diagnostics]


def test_end_to_end_two_nodes():
    result = compute_layout(_make_simple_graph())
    a, b = result.node("a"), result.node("b")

    assert (a.rank, a.row, a.column) == (0, 0, 0)
    assert (b.rank, b.row, b.column) == (1, 1, 0)

    conn = result.connections[0]
    assert conn.from_y == a.y + a.height / 2
    assert conn.to_y == b.y - b.height / 2
    assert conn.from_x == conn.to_x == a.x
    assert result.diagnostics == []


def test_missing_references_are_dropped():
    graph = _make_simple_graph()
    graph.nodes.append(_node("c"))
    graph.connections += [
        DiagramConnection("b", "c"),
        DiagramConnection("c", "ghost"),
        DiagramConnection("phantom", "a"),
    ]
    result = compute_layout(graph)

    assert len(result.nodes) == 3
    assert len(result.connections) == 2
    assert _kinds(result).count(DiagnosticKind.INVALID_REFERENCE) == 2
    assert any("ghost" in d.message for d in result.diagnostics)


def test_rank_monotonicity():
    result = compute_layout(_make_dag())
    for conn in result.connections:
        assert result.node(conn.source).rank < result.node(conn.target).rank


def test_layout_is_deterministic():
    graph = _make_dag()
    assert positioned_to_dict(compute_layout(graph)) == positioned_to_dict(
        compute_layout(graph)
    )


def test_input_graph_is_not_mutated():
    graph = _make_dag()
    graph.groups.append(DiagramGroup(id="g", label="G", node_ids=["a", "zz"]))
    graph.notes.append(DiagramNote(text="hello", attached_to="a"))
    before = copy.deepcopy(graph)
    compute_layout(graph)
    assert graph == before
    assert all(n.row is None and n.column is None for n in graph.nodes)


def test_hint_preservation():
    graph = _make_dag()
    graph.nodes[3] = _node("d", row=7, column=4)
    result = compute_layout(graph)
    d = result.node("d")
    assert (d.row, d.column) == (7, 4)
    assert (d.x, d.y) == (80 + 4 * 360 + 180, 80 + 50 + 7 * 220 + 110)


def test_snake_layout_in_left_to_right_mode():
    ids = list("abcdefgh")
    graph = DiagramGraph(
        direction="LR",
        nodes=[_node(n) for n in ids],
        connections=[DiagramConnection(s, t) for s, t in zip(ids, ids[1:])],
    )
    result = compute_layout(graph)
    assert [result.node(n).row for n in ids] == [0, 0, 0, 0, 1, 1, 1, 1]
    assert [result.node(n).column for n in ids] == [0, 1, 2, 3, 3, 2, 1, 0]
    # The wrap from d to e goes straight down
    wrap = result.connections[3]
    assert wrap.from_x == wrap.to_x
    assert wrap.from_y < wrap.to_y


def test_snake_only_applies_to_left_to_right():
    ids = list("abcdefgh")
    graph = DiagramGraph(
        direction="TB",
        nodes=[_node(n) for n in ids],
        connections=[DiagramConnection(s, t) for s, t in zip(ids, ids[1:])],
    )
    result = compute_layout(graph)
    assert [result.node(n).row for n in ids] == list(range(8))
    assert DiagnosticKind.SNAKE_FALLBACK not in _kinds(result)


def test_snake_fallback_reported_for_branching_graph():
    graph = DiagramGraph(
        direction="LR",
        nodes=[_node(n) for n in "abc"],
        connections=[DiagramConnection("a", "b"), DiagramConnection("a", "c")],
    )
    result = compute_layout(graph)
    assert DiagnosticKind.SNAKE_FALLBACK in _kinds(result)
    assert result.node("b").column == 1
    assert result.node("c").column == 1


def test_cycle_is_reported_and_laid_out():
    graph = DiagramGraph(
        direction="TB",
        nodes=[_node(n) for n in "abc"],
        connections=[
            DiagramConnection("a", "b"),
            DiagramConnection("b", "c"),
            DiagramConnection("c", "a"),
        ],
    )
    result = compute_layout(graph)
    assert [n.rank for n in result.nodes] == [0, 1, 2]
    assert len(result.connections) == 3
    cycle = [d for d in result.diagnostics if d.kind == DiagnosticKind.CYCLE_BROKEN]
    assert [d.subject for d in cycle] == ["c->a"]


def test_group_bounding_box():
    graph = _make_dag()
    graph.groups.append(DiagramGroup(id="g", label="Middle", node_ids=["b", "c"]))
    result = compute_layout(graph)
    group = result.groups[0]
    b, c = result.node("b"), result.node("c")
    pad = DEFAULT_CONFIG.group_padding

    assert group.x == min(b.left, c.left) - pad
    assert group.x + group.width == max(b.right, c.right) + pad
    assert group.y + group.height == max(b.bottom, c.bottom) + pad
    # Extra room on top for the label
    assert group.y < min(b.top, c.top) - pad


def test_group_drops_missing_members():
    graph = _make_dag()
    graph.groups += [
        DiagramGroup(id="partial", label="P", node_ids=["a", "nope"]),
        DiagramGroup(id="empty", label="E", node_ids=["nope", "nada"]),
    ]
    result = compute_layout(graph)
    assert [g.id for g in result.groups] == ["partial"]
    assert result.groups[0].node_ids == ["a"]
    kinds = _kinds(result)
    assert kinds.count(DiagnosticKind.INVALID_REFERENCE) == 3
    assert kinds.count(DiagnosticKind.DEGENERATE_GROUP) == 1


def test_blank_notes_are_dropped():
    graph = _make_simple_graph()
    graph.notes = [DiagramNote(text="  "), DiagramNote(text=""), DiagramNote(text="kept")]
    result = compute_layout(graph)
    assert [n.text for n in result.notes] == ["kept"]
    assert _kinds(result).count(DiagnosticKind.EMPTY_NOTE) == 2


def test_attached_notes_sit_beside_node():
    graph = _make_simple_graph()
    graph.notes = [
        DiagramNote(text="below by default", attached_to="a"),
        DiagramNote(text="to the left", attached_to="a", position="left"),
        DiagramNote(text="to the right", attached_to="a", position="right"),
        DiagramNote(text="above", attached_to="b", position="above"),
    ]
    result = compute_layout(graph)
    a, b = result.node("a"), result.node("b")
    below, left, right, above = result.notes
    gap = DEFAULT_CONFIG.note_offset

    assert below.x == a.x
    assert below.y - below.height / 2 == a.bottom + gap
    assert left.y == a.y
    assert left.x + left.width / 2 == a.left - gap
    assert right.x - right.width / 2 == a.right + gap
    assert above.x == b.x
    assert above.y + above.height / 2 == b.top - gap


def test_note_height_estimate():
    graph = _make_simple_graph()
    graph.notes = [DiagramNote(text="hi"), DiagramNote(text="x" * 100)]
    result = compute_layout(graph)
    assert result.notes[0].height == 2 * 22 + 30
    assert result.notes[1].height == 3 * 22 + 30
    assert all(n.width == DEFAULT_CONFIG.note_width for n in result.notes)


def test_floating_notes_stack_below_grid():
    graph = DiagramGraph(direction="TB", nodes=[_node("a")])
    graph.notes = [
        DiagramNote(text="first"),
        DiagramNote(text="dangling", attached_to="missing"),
    ]
    result = compute_layout(graph)
    first, second = result.notes
    assert first.x == second.x == 80 + 360 / 2
    assert first.y == 80 + 50 + 220 + 120
    assert second.y == first.y + 120 + 20


def test_title_centered_over_grid():
    graph = _make_dag()
    graph.title = "Flow"
    graph.title_emoji = "🔀"
    result = compute_layout(graph)
    max_col = max(n.column for n in result.nodes)
    assert result.title.text == "Flow"
    assert result.title.emoji == "🔀"
    assert result.title.x == 80 + (max_col + 1) * 360 / 2
    assert result.title.y == DEFAULT_CONFIG.title_y


def test_no_title():
    assert compute_layout(_make_simple_graph()).title is None


def test_injected_config():
    config = dataclasses.replace(DEFAULT_CONFIG, cell_width=100, margin=10)
    result = compute_layout(_make_simple_graph(), config)
    assert result.node("a").x == 10 + 50


def test_empty_graph():
    result = compute_layout(DiagramGraph(direction="TB"))
    assert result.nodes == []
    assert result.connections == []
