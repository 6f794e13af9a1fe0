"""Graph container — adjacency list over hashable vertex ids."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field

Vertex = Hashable


@dataclass
class Graph:
    """Adjacency-list graph.

    Neighbor lists keep insertion order and may hold duplicates, so parallel
    edges are legal. Traversal order follows the order edges were added.
    """

    directed: bool = False
    adjacency: dict[Vertex, list[Vertex]] = field(default_factory=dict)
    _edges: int = field(default=0, init=False, repr=False)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[Vertex, Vertex]],
        directed: bool = False,
        vertices: Iterable[Vertex] = (),
    ) -> Graph:
        g = cls(directed=directed)
        for v in vertices:
            g.add_vertex(v)
        for u, v in edges:
            g.add_edge(u, v)
        return g

    def add_vertex(self, v: Vertex) -> None:
        if v not in self.adjacency:
            self.adjacency[v] = []

    def add_edge(self, u: Vertex, v: Vertex) -> None:
        self.add_vertex(u)
        self.add_vertex(v)
        self.adjacency[u].append(v)
        if not self.directed:
            self.adjacency[v].append(u)
        self._edges += 1

    def neighbors(self, v: Vertex) -> list[Vertex]:
        """Return neighbors of *v*, or an empty list if *v* is not in the graph."""
        return self.adjacency.get(v, [])

    def has_vertex(self, v: Vertex) -> bool:
        return v in self.adjacency

    def all_vertices(self) -> list[Vertex]:
        return list(self.adjacency)

    def vertex_count(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        """Number of edges added, counting an undirected edge once."""
        return self._edges

    def __contains__(self, v: object) -> bool:
        return v in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)
