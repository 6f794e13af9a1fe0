"""Traversal engine — a single breadth-first frontier expansion.

Every query in the package drives :func:`expand` with its own hooks instead of
carrying a private copy of the BFS loop. A vertex is marked visited when it is
discovered, not when it is dequeued, so each vertex enters the frontier at
most once and discovery order is non-decreasing in distance from the start.
Ties between vertices at the same distance follow neighbor enumeration order.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

Vertex = Hashable


class Step(Enum):
    """What the engine does after a hook fires."""

    EXPAND = "expand"
    PRUNE = "prune"
    STOP = "stop"


class VisitedStore(Protocol):
    def __contains__(self, item: Any) -> bool: ...

    def add(self, item: Any) -> None: ...


# Parent recorded for the start vertex. Any hashable, None included, can be a vertex.
ROOT: Any = object()

NeighborFn = Callable[[Any], Iterable[Any]]
VisitHook = Callable[[Any, int], Step]
DiscoverHook = Callable[[Any, Any, int], Step]


@dataclass
class Traversal:
    """Outcome of one :func:`expand` call."""

    order: list[Vertex] = field(default_factory=list)
    depth: dict[Vertex, int] = field(default_factory=dict)
    parents: MutableMapping[Any, Any] | None = None
    visited: Any = None
    stopped_at: tuple[Vertex, int] | None = None

    @property
    def stopped(self) -> bool:
        return self.stopped_at is not None


def expand(
    start: Vertex,
    neighbors: NeighborFn,
    *,
    on_visit: VisitHook | None = None,
    on_discover: DiscoverHook | None = None,
    visited: VisitedStore | None = None,
    parents: MutableMapping[Any, Any] | None = None,
) -> Traversal:
    """Breadth-first expansion from *start*.

    ``on_visit(vertex, depth)`` runs when a vertex is dequeued. PRUNE keeps the
    vertex's neighbors out of the frontier, STOP ends the run.

    ``on_discover(neighbor, parent, depth)`` runs for every neighbor of the
    vertex being expanded, before the visited check. STOP ends the run without
    enqueuing the neighbor.

    *visited* and *parents* default to a set and a dict. Any store supporting
    ``in``/``add`` and item assignment works, which lets dense grids avoid
    hashing. The root's parent is recorded as :data:`ROOT`.

    Callers decide what an unknown *start* means; the engine does not check
    membership.
    """
    if visited is None:
        visited = set()
    result = Traversal(parents=parents, visited=visited)

    visited.add(start)
    result.depth[start] = 0
    if parents is not None:
        parents[start] = ROOT
    frontier: deque[tuple[Vertex, int]] = deque([(start, 0)])

    while frontier:
        current, depth = frontier.popleft()
        result.order.append(current)

        if on_visit is not None:
            step = on_visit(current, depth)
            if step is Step.STOP:
                result.stopped_at = (current, depth)
                return result
            if step is Step.PRUNE:
                continue

        for neighbor in neighbors(current):
            if on_discover is not None:
                if on_discover(neighbor, current, depth + 1) is Step.STOP:
                    result.stopped_at = (neighbor, depth + 1)
                    return result
            if neighbor not in visited:
                visited.add(neighbor)
                result.depth[neighbor] = depth + 1
                if parents is not None:
                    parents[neighbor] = current
                frontier.append((neighbor, depth + 1))

    return result


def reconstruct_path(
    parents: MutableMapping[Any, Any], target: Vertex, root_marker: Any = ROOT
) -> list[Vertex]:
    """Walk parent links from *target* back to the root and return the path.

    The root is the vertex whose parent equals *root_marker*. Returns an empty
    list when *target* was never discovered.
    """
    if target not in parents:
        return []

    path: list[Vertex] = []
    current = target
    while current is not root_marker and current != root_marker:
        path.append(current)
        current = parents[current]
    path.reverse()
    return path
