"""Implicit-graph search strategies driven by caller-supplied neighbor functions."""

from .common import SearchStats, reconstruct_path
from .dfs import depth_first_search, depth_first_path
from .bfs import breadth_first_search, breadth_first_path
from .a_star import astar, astar_path

__all__ = [
    "SearchStats", "reconstruct_path",
    "depth_first_search", "depth_first_path",
    "breadth_first_search", "breadth_first_path",
    "astar", "astar_path",
]
