"""breadthwise — breadth-first graph and grid exploration."""

from breadthwise.graph import Graph
from breadthwise.grid import Grid, grid_bfs, grid_distance, grid_reachable
from breadthwise.queries import (
    NOT_FOUND,
    distance_to,
    distances,
    eccentricity,
    find_connected_components,
    is_connected,
    levels,
    shortest_distance,
    shortest_path,
    traverse,
    vertices_at_distance,
)
from breadthwise.traversal import ROOT, Step, Traversal, expand, reconstruct_path

__all__ = [
    "NOT_FOUND",
    "ROOT",
    "Graph",
    "Grid",
    "Step",
    "Traversal",
    "distance_to",
    "distances",
    "eccentricity",
    "expand",
    "find_connected_components",
    "grid_bfs",
    "grid_distance",
    "grid_reachable",
    "is_connected",
    "levels",
    "reconstruct_path",
    "shortest_distance",
    "shortest_path",
    "traverse",
    "vertices_at_distance",
]
