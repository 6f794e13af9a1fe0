"""Grid graph — 4-connected lattice over a passability matrix."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from breadthwise.logger import logger
from breadthwise.traversal import ROOT, Step, expand, reconstruct_path

Cell = tuple[int, int]

# Up, down, left, right. Neighbor order, and so tie-breaking, follows this list.
OFFSETS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

NO_PARENT: Cell = (-1, -1)


class Grid:
    """Rectangular grid where ``0``/``False`` cells are open and anything else is blocked.

    Width is taken from the first row. Short rows are padded with blocked
    cells and long rows are cut to that width.
    """

    def __init__(self, cells: Sequence[Sequence[Any]]) -> None:
        self.rows = len(cells)
        self.cols = len(cells[0]) if self.rows else 0
        self._open: list[list[bool]] = []
        for row in cells:
            line = [not value for value in list(row)[: self.cols]]
            line.extend([False] * (self.cols - len(line)))
            self._open.append(line)

    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_passable(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and self._open[cell[0]][cell[1]]

    def neighbors(self, cell: Cell) -> list[Cell]:
        r, c = cell
        out: list[Cell] = []
        for dr, dc in OFFSETS:
            nxt = (r + dr, c + dc)
            if self.is_passable(nxt):
                out.append(nxt)
        return out

    def passable_cells(self) -> list[Cell]:
        return [
            (r, c)
            for r in range(self.rows)
            for c in range(self.cols)
            if self._open[r][c]
        ]

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"


class CellMask:
    """Dense visited set addressed by ``(row, col)``."""

    def __init__(self, rows: int, cols: int) -> None:
        self._bits = [[False] * cols for _ in range(rows)]

    def __contains__(self, cell: object) -> bool:
        r, c = cell  # type: ignore[misc]
        return self._bits[r][c]

    def add(self, cell: Cell) -> None:
        r, c = cell
        self._bits[r][c] = True


class CellParents:
    """Dense parent map. The start cell's parent is ``NO_PARENT``."""

    def __init__(self, rows: int, cols: int) -> None:
        self._cells: list[list[Cell | None]] = [[None] * cols for _ in range(rows)]

    def __contains__(self, cell: object) -> bool:
        r, c = cell  # type: ignore[misc]
        return self._cells[r][c] is not None

    def __getitem__(self, cell: Cell) -> Cell:
        parent = self._cells[cell[0]][cell[1]]
        if parent is None:
            raise KeyError(cell)
        return parent

    def __setitem__(self, cell: Cell, parent: Any) -> None:
        self._cells[cell[0]][cell[1]] = NO_PARENT if parent is ROOT else parent


def _as_grid(grid: Grid | Sequence[Sequence[Any]]) -> Grid:
    return grid if isinstance(grid, Grid) else Grid(grid)


def _is_coord(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_cell(value: Any) -> Cell | None:
    """Return *value* as a cell if it is a pair of ints, else None."""
    if isinstance(value, (str, bytes)):
        return None
    try:
        r, c = value
    except (TypeError, ValueError):
        return None
    if not (_is_coord(r) and _is_coord(c)):
        return None
    return (r, c)


def grid_bfs(
    grid: Grid | Sequence[Sequence[Any]], start: Cell, target: Cell
) -> list[Cell]:
    """Shortest 4-connected path of cells from *start* to *target*, inclusive.

    Empty when either endpoint is malformed, out of bounds or blocked, or when
    no route exists.
    """
    g = _as_grid(grid)
    src, dst = _as_cell(start), _as_cell(target)
    if src is None or dst is None or not g.is_passable(src) or not g.is_passable(dst):
        logger.debug("grid_bfs: endpoint %r or %r not an open cell", start, target)
        return []
    if src == dst:
        return [src]

    def stop_at_target(cell: Cell, depth: int) -> Step:
        return Step.STOP if cell == dst else Step.EXPAND

    parents = CellParents(g.rows, g.cols)
    run = expand(
        src,
        g.neighbors,
        on_visit=stop_at_target,
        visited=CellMask(g.rows, g.cols),
        parents=parents,  # type: ignore[arg-type]
    )
    if not run.stopped:
        return []
    return reconstruct_path(parents, dst, root_marker=NO_PARENT)  # type: ignore[arg-type]


def grid_distance(grid: Grid | Sequence[Sequence[Any]], start: Cell, target: Cell) -> int:
    """Number of steps on a shortest path, -1 when there is no path."""
    path = grid_bfs(grid, start, target)
    return len(path) - 1 if path else -1


def grid_reachable(grid: Grid | Sequence[Sequence[Any]], start: Cell) -> list[Cell]:
    """Open cells reachable from *start*, in breadth-first order."""
    g = _as_grid(grid)
    src = _as_cell(start)
    if src is None or not g.is_passable(src):
        return []
    return expand(src, g.neighbors, visited=CellMask(g.rows, g.cols)).order
