"""Query layer — BFS-derived queries over a :class:`Graph`.

Every query is total: unknown vertices, unreachable targets and negative
distances come back as sentinel results (``[]``, ``-1``/``None``), never as
exceptions.
"""

from __future__ import annotations

from collections.abc import Hashable

from breadthwise.graph import Graph
from breadthwise.logger import logger
from breadthwise.traversal import Step, expand, reconstruct_path

Vertex = Hashable

NOT_FOUND = -1


def traverse(graph: Graph, start: Vertex) -> list[Vertex]:
    """Return vertices reachable from *start* in breadth-first discovery order."""
    if not graph.has_vertex(start):
        logger.debug("traverse: start vertex %r not in graph", start)
        return []
    return expand(start, graph.neighbors).order


def shortest_path(graph: Graph, start: Vertex, target: Vertex) -> list[Vertex]:
    """Return the vertices of a shortest path from *start* to *target*, inclusive.

    Empty when either endpoint is unknown or *target* is unreachable.
    """
    if not graph.has_vertex(start) or not graph.has_vertex(target):
        return []
    if start == target:
        return [start]

    def stop_at_target(v: Vertex, depth: int) -> Step:
        return Step.STOP if v == target else Step.EXPAND

    parents: dict[Vertex, Vertex] = {}
    run = expand(start, graph.neighbors, on_visit=stop_at_target, parents=parents)
    if not run.stopped:
        logger.debug("shortest_path: %r unreachable from %r", target, start)
        return []
    return reconstruct_path(parents, target)


def distance_to(graph: Graph, start: Vertex, target: Vertex) -> int | None:
    """Return the hop count from *start* to *target*, or None if there is none."""
    if not graph.has_vertex(start) or not graph.has_vertex(target):
        return None
    if start == target:
        return 0

    # The target is reported as soon as it shows up as a neighbor, one level
    # earlier than waiting for it to be dequeued.
    def spot_target(v: Vertex, parent: Vertex, depth: int) -> Step:
        return Step.STOP if v == target else Step.EXPAND

    run = expand(start, graph.neighbors, on_discover=spot_target)
    if run.stopped_at is None:
        return None
    return run.stopped_at[1]


def shortest_distance(graph: Graph, start: Vertex, target: Vertex) -> int:
    """Like :func:`distance_to` but with ``NOT_FOUND`` (-1) in place of None."""
    dist = distance_to(graph, start, target)
    return NOT_FOUND if dist is None else dist


def vertices_at_distance(graph: Graph, start: Vertex, distance: int) -> list[Vertex]:
    """Return the vertices exactly *distance* hops from *start*, in discovery order."""
    if not graph.has_vertex(start) or distance < 0:
        return []
    if distance == 0:
        return [start]

    found: list[Vertex] = []

    def collect(v: Vertex, depth: int) -> Step:
        if depth == distance:
            found.append(v)
            return Step.PRUNE
        return Step.EXPAND

    expand(start, graph.neighbors, on_visit=collect)
    return found


def levels(graph: Graph, start: Vertex) -> list[list[Vertex]]:
    """Group reachable vertices by distance: ``[[start], level 1, level 2, ...]``."""
    if not graph.has_vertex(start):
        return []
    run = expand(start, graph.neighbors)
    grouped: list[list[Vertex]] = []
    for v in run.order:
        d = run.depth[v]
        if d == len(grouped):
            grouped.append([])
        grouped[d].append(v)
    return grouped


def distances(graph: Graph, start: Vertex) -> dict[Vertex, int]:
    """Map every vertex reachable from *start* to its hop count."""
    if not graph.has_vertex(start):
        return {}
    return dict(expand(start, graph.neighbors).depth)


def eccentricity(graph: Graph, start: Vertex) -> int:
    """Greatest distance from *start* to any reachable vertex, -1 if unknown."""
    if not graph.has_vertex(start):
        return NOT_FOUND
    return max(expand(start, graph.neighbors).depth.values())


def is_connected(graph: Graph) -> bool:
    """True when a traversal from the first vertex reaches every vertex.

    An empty graph is connected.
    """
    vertices = graph.all_vertices()
    if not vertices:
        return True
    return len(traverse(graph, vertices[0])) == len(vertices)


def find_connected_components(graph: Graph) -> list[list[Vertex]]:
    """Partition the vertices into components, each in discovery order.

    Seeds are taken in vertex enumeration order. The visited set is shared
    across seeds, so in a directed graph a vertex belongs to the component of
    the first seed that reaches it.
    """
    components: list[list[Vertex]] = []
    seen: set[Vertex] = set()
    for vertex in graph.all_vertices():
        if vertex in seen:
            continue
        components.append(expand(vertex, graph.neighbors, visited=seen).order)
    logger.debug("find_connected_components: %d component(s)", len(components))
    return components
