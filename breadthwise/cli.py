"""CLI entry point — run BFS queries against a YAML input document."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from breadthwise.config import load_config
from breadthwise.graph import Graph
from breadthwise.grid import Cell, Grid, grid_bfs
from breadthwise.loader import InputError, load_graph, load_grid
from breadthwise.model import BreadthwiseConfig, VertexId, coerce_vertex
from breadthwise.queries import (
    find_connected_components,
    is_connected,
    levels,
    shortest_distance,
    shortest_path,
    traverse,
    vertices_at_distance,
)
from breadthwise.render import (
    format_grid,
    format_grid_path,
    format_path,
    format_traversal,
    print_adjacency,
    print_components,
)

app = typer.Typer(no_args_is_help=True)

InputOpt = Annotated[Path, typer.Option("--input", help="Path to the YAML input document")]
ConfigOpt = Annotated[
    Path | None, typer.Option("--config", help="Path to breadthwise.yml")
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")]


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """breadthwise — breadth-first graph and grid queries."""


def _parse_vertex(value: str) -> VertexId:
    return coerce_vertex(value.strip())


def _parse_cell(value: str) -> Cell:
    parts = value.split(",")
    try:
        if len(parts) != 2:
            raise ValueError(value)
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        typer.echo(f"Error: invalid cell '{value}'. Expected ROW,COL.", err=True)
        raise SystemExit(2)  # noqa: B904


def _setup(config_path: Path | None, verbose: bool) -> BreadthwiseConfig:
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)
    return load_config(config_path)


def _graph(input_path: Path) -> Graph:
    try:
        return load_graph(input_path)
    except InputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(2)  # noqa: B904


def _grid(input_path: Path) -> Grid:
    try:
        return load_grid(input_path)
    except InputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(2)  # noqa: B904


@app.command("traverse")
def traverse_cmd(
    input_path: InputOpt,
    start: Annotated[str, typer.Option("--start", help="Start vertex")],
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print vertices in breadth-first order."""
    cfg = _setup(config_path, verbose)
    graph = _graph(input_path)
    order = traverse(graph, _parse_vertex(start))
    typer.echo(format_traversal(order, settings=cfg.render))


@app.command("path")
def path_cmd(
    input_path: InputOpt,
    start: Annotated[str, typer.Option("--start", help="Start vertex")],
    target: Annotated[str, typer.Option("--target", help="Target vertex")],
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print a shortest path between two vertices."""
    cfg = _setup(config_path, verbose)
    graph = _graph(input_path)
    path = shortest_path(graph, _parse_vertex(start), _parse_vertex(target))
    typer.echo(format_path(path, title="Shortest Path", settings=cfg.render))


@app.command("distance")
def distance_cmd(
    input_path: InputOpt,
    start: Annotated[str, typer.Option("--start", help="Start vertex")],
    target: Annotated[str, typer.Option("--target", help="Target vertex")],
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print the hop count between two vertices, -1 if unreachable."""
    _setup(config_path, verbose)
    graph = _graph(input_path)
    typer.echo(str(shortest_distance(graph, _parse_vertex(start), _parse_vertex(target))))


@app.command("level")
def level_cmd(
    input_path: InputOpt,
    start: Annotated[str, typer.Option("--start", help="Start vertex")],
    distance: Annotated[int, typer.Option("--distance", help="Hop count")],
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print the vertices exactly DISTANCE hops from START."""
    cfg = _setup(config_path, verbose)
    graph = _graph(input_path)
    found = vertices_at_distance(graph, _parse_vertex(start), distance)
    typer.echo(format_traversal(found, title=f"Distance {distance}", settings=cfg.render))


@app.command("levels")
def levels_cmd(
    input_path: InputOpt,
    start: Annotated[str, typer.Option("--start", help="Start vertex")],
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print every level set reachable from START."""
    _setup(config_path, verbose)
    graph = _graph(input_path)
    for depth, level in enumerate(levels(graph, _parse_vertex(start))):
        typer.echo(f"{depth}: " + " ".join(str(v) for v in level))


@app.command("components")
def components_cmd(
    input_path: InputOpt,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print the connected components of the graph."""
    _setup(config_path, verbose)
    graph = _graph(input_path)
    print_components(find_connected_components(graph))


@app.command("connected")
def connected_cmd(
    input_path: InputOpt,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Exit 0 if the graph is connected, 1 otherwise."""
    _setup(config_path, verbose)
    graph = _graph(input_path)
    if is_connected(graph):
        typer.echo("connected")
        return
    typer.echo("not connected")
    raise SystemExit(1)


@app.command("show")
def show_cmd(
    input_path: InputOpt,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print the adjacency list as a table."""
    _setup(config_path, verbose)
    print_adjacency(_graph(input_path))


@app.command("grid-path")
def grid_path_cmd(
    input_path: InputOpt,
    start: Annotated[str, typer.Option("--start", help="Start cell as ROW,COL")],
    target: Annotated[str, typer.Option("--target", help="Target cell as ROW,COL")],
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print a shortest obstacle-avoiding path across the grid."""
    cfg = _setup(config_path, verbose)
    grid = _grid(input_path)
    path = grid_bfs(grid, _parse_cell(start), _parse_cell(target))
    typer.echo(format_grid_path(path, settings=cfg.render))
    typer.echo(format_grid(grid, path, settings=cfg.render))
