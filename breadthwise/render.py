"""Presentation helpers — plain-text dumps and rich tables."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from breadthwise.model import RenderSettings

if TYPE_CHECKING:
    from breadthwise.graph import Graph
    from breadthwise.grid import Cell, Grid


def _settings(settings: RenderSettings | None) -> RenderSettings:
    return settings if settings is not None else RenderSettings()


def format_traversal(
    order: Sequence[Hashable],
    title: str = "BFS Traversal",
    settings: RenderSettings | None = None,
) -> str:
    s = _settings(settings)
    return f"{title}: " + s.separator.join(str(v) for v in order)


def format_path(
    path: Sequence[Hashable],
    title: str = "Path",
    settings: RenderSettings | None = None,
) -> str:
    s = _settings(settings)
    if not path:
        return f"{title}: {s.no_path}"
    return f"{title}: " + s.separator.join(str(v) for v in path)


def format_grid_path(
    path: Sequence[Cell],
    title: str = "Grid Path",
    settings: RenderSettings | None = None,
) -> str:
    s = _settings(settings)
    if not path:
        return f"{title}: {s.no_path}"
    return f"{title}: " + s.separator.join(f"({r},{c})" for r, c in path)


def format_graph(graph: Graph) -> str:
    """Adjacency dump, one ``vertex: neighbors`` line per vertex."""
    lines = ["Graph adjacency list:"]
    for v in graph.all_vertices():
        lines.append(f"{v}: " + " ".join(str(n) for n in graph.neighbors(v)))
    return "\n".join(lines)


def format_grid(
    grid: Grid,
    path: Sequence[Cell] = (),
    settings: RenderSettings | None = None,
) -> str:
    """Draw the grid, marking cells on *path*."""
    s = _settings(settings)
    on_path = set(path)
    lines: list[str] = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            if (r, c) in on_path:
                row.append(s.path_cell)
            elif grid.is_passable((r, c)):
                row.append(s.open_cell)
            else:
                row.append(s.blocked_cell)
        lines.append("".join(row))
    return "\n".join(lines)


def print_adjacency(graph: Graph, console: Console | None = None) -> None:
    console = console or Console()
    kind = "directed" if graph.directed else "undirected"
    table = Table(title=f"Adjacency ({kind})")
    table.add_column("Vertex", style="bold")
    table.add_column("Neighbors")
    table.add_column("Degree", justify="right")
    for v in graph.all_vertices():
        neighbors = graph.neighbors(v)
        table.add_row(
            escape(str(v)),
            escape(", ".join(str(n) for n in neighbors)),
            str(len(neighbors)),
        )
    console.print(table)
    console.print(f"Vertices: {graph.vertex_count()}, edges: {graph.edge_count()}")


def print_components(
    components: Sequence[Sequence[Hashable]], console: Console | None = None
) -> None:
    console = console or Console()
    table = Table(title="Connected Components")
    table.add_column("#", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Vertices")
    for i, component in enumerate(components, start=1):
        table.add_row(
            str(i), str(len(component)), escape(", ".join(str(v) for v in component))
        )
    console.print(table)
