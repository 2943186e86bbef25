"""CLI for semantic-layout."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import click

from semantic_layout import __version__
from semantic_layout.layout import DEFAULT_CONFIG, LayoutConfig, compute_layout
from semantic_layout.parser import load_diagram
from semantic_layout.parser.model import DIRECTIONS, DiagnosticKind, DiagramGraph
from semantic_layout.render import render_json, render_svg
from semantic_layout.themes import THEMES


def _load_or_exit(input_file: Path) -> DiagramGraph:
    try:
        return load_diagram(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _config_from_options(
    cell_width: float | None,
    cell_height: float | None,
    margin: float | None,
) -> LayoutConfig:
    overrides = {
        name: value
        for name, value in (
            ("cell_width", cell_width),
            ("cell_height", cell_height),
            ("margin", margin),
        )
        if value is not None
    }
    return dataclasses.replace(DEFAULT_CONFIG, **overrides)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout decisions to stderr")
def cli(verbose: bool) -> None:
    """semantic-layout: Position semantic diagram graphs on a grid."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Defaults to <input>.layout.json")
@click.option("--direction", type=click.Choice(list(DIRECTIONS)), default=None,
              help="Override the graph's layout direction")
@click.option("--cell-width", type=float, default=None,
              help=f"Horizontal grid pitch (default: {DEFAULT_CONFIG.cell_width:g})")
@click.option("--cell-height", type=float, default=None,
              help=f"Vertical grid pitch (default: {DEFAULT_CONFIG.cell_height:g})")
@click.option("--margin", type=float, default=None,
              help=f"Outer canvas padding (default: {DEFAULT_CONFIG.margin:g})")
def layout(
    input_file: Path,
    output: Path | None,
    direction: str | None,
    cell_width: float | None,
    cell_height: float | None,
    margin: float | None,
) -> None:
    """Lay out a diagram graph and write the positioned graph as JSON."""
    graph = _load_or_exit(input_file)
    if direction:
        graph = dataclasses.replace(graph, direction=direction)

    config = _config_from_options(cell_width, cell_height, margin)
    positioned = compute_layout(graph, config)

    if output is None:
        output = input_file.with_name(input_file.stem + ".layout.json")

    output.write_text(render_json(positioned) + "\n")
    for diag in positioned.diagnostics:
        click.echo(f"  - {diag.message}", err=True)
    click.echo(f"Positioned {len(positioned.nodes)} nodes, "
               f"{len(positioned.connections)} connections, "
               f"{len(positioned.groups)} groups, "
               f"{len(positioned.notes)} notes -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a diagram graph file."""
    graph = _load_or_exit(input_file)
    positioned = compute_layout(graph)

    errors = [
        d for d in positioned.diagnostics
        if d.kind == DiagnosticKind.INVALID_REFERENCE
    ]
    warnings = [d for d in positioned.diagnostics if d not in errors]

    for diag in warnings:
        click.echo(f"Warning: {diag.message}", err=True)

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err.message}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(graph.nodes)} nodes, "
               f"{len(graph.connections)} connections, "
               f"{len(graph.groups)} groups, "
               f"{len(graph.notes)} notes")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a diagram graph file."""
    graph = _load_or_exit(input_file)

    click.echo(f"Title: {graph.title or '(none)'}")
    click.echo(f"Direction: {graph.direction}")
    click.echo(f"Nodes: {len(graph.nodes)}")
    for node in graph.nodes:
        hint = ""
        if node.row is not None or node.column is not None:
            hint = f" [row={node.row}, column={node.column}]"
        click.echo(f"  {node.id} ({node.type}, {node.importance}): {node.label}{hint}")
    click.echo(f"Connections: {len(graph.connections)}")
    click.echo(f"Groups: {len(graph.groups)}")
    for group in graph.groups:
        click.echo(f"  {group.label}: {len(group.node_ids)} nodes")
    click.echo(f"Notes: {len(graph.notes)}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Preview theme (default: light)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: int | None,
    height: int | None,
) -> None:
    """Render a wireframe SVG preview of a diagram graph's layout."""
    graph = _load_or_exit(input_file)
    positioned = compute_layout(graph)

    svg = render_svg(positioned, THEMES[theme], width=width, height=height)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(positioned.nodes)} nodes, "
               f"{len(positioned.connections)} connections -> {output}")
