"""Package exposing search strategy implementations."""

from .base import SearchAlgorithm
from .common import SearchEntry, reconstruct_path
from .bfs import BreadthFirstSearch
from .dfs import DepthFirstSearch, DepthPolicy, run_depth_first
from .dls import DepthLimitedSearch
from .ids import IterativeDeepeningSearch
from .astar import AStarSearch
from .dijkstra import UniformCostSearch

STRATEGIES = {
    "BFS": BreadthFirstSearch,
    "DFS": DepthFirstSearch,
    "DLS": DepthLimitedSearch,
    "IDS": IterativeDeepeningSearch,
    "AS": AStarSearch,
    "UCS": UniformCostSearch,
}


def make_search(name, root, goal, heuristic=None, depth_limit=None, max_depth=None):
    """Build the strategy registered under `name` (case-insensitive)."""
    key = name.upper()
    if key not in STRATEGIES:
        raise ValueError(f"Unknown method: {name}")
    if key == "DLS":
        if depth_limit is None:
            raise ValueError("DLS needs a depth limit")
        return DepthLimitedSearch(depth_limit, root, goal, heuristic)
    if key == "IDS":
        return IterativeDeepeningSearch(root, goal, heuristic, max_depth=max_depth)
    return STRATEGIES[key](root, goal, heuristic)


__all__ = [
    "SearchAlgorithm",
    "SearchEntry",
    "reconstruct_path",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DepthPolicy",
    "run_depth_first",
    "DepthLimitedSearch",
    "IterativeDeepeningSearch",
    "AStarSearch",
    "UniformCostSearch",
    "STRATEGIES",
    "make_search",
]
