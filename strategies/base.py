from abc import ABC, abstractmethod

from common import as_heuristic


class SearchAlgorithm(ABC):
    """The shared contract of every search strategy.

    Stores the inputs of a search: a root state, a goal state and (if
    appropriate) a heuristic. `search()` runs until the goal is found or the
    frontier is exhausted; results are then read through `goal_found()`,
    `get_goal_depth()`, `get_goal_cost()` and `get_goal_path()`. The last three
    are only meaningful when `goal_found()` is True.
    """

    name = "search"

    def __init__(self, root, goal, heuristic=None):
        self._root = root
        self._goal = goal
        self._heuristic = as_heuristic(heuristic)
        self._reset_results()

    @property
    def root(self):
        return self._root

    @property
    def goal(self):
        return self._goal

    @property
    def heuristic(self):
        return self._heuristic

    def _reset_results(self):
        self._goal_found = False
        self._goal_depth = 0
        self._goal_cost = 0.0
        self._goal_path = []
        self._nodes_expanded = 0

    def _record_goal(self, entry, path):
        self._goal_found = True
        self._goal_depth = entry.depth
        self._goal_cost = entry.total_cost
        self._goal_path = list(path)

    @abstractmethod
    def search(self):
        """Run the search to completion. Results are read via the accessors."""

    def goal_found(self):
        return self._goal_found

    def get_goal_depth(self):
        return self._goal_depth

    def get_goal_cost(self):
        return self._goal_cost

    def get_goal_path(self):
        """The path from root to goal, both inclusive."""
        return list(self._goal_path)

    def get_nodes_expanded(self):
        return self._nodes_expanded

    def __repr__(self):
        return f"{type(self).__name__}(root={self._root!r}, goal={self._goal!r})"
