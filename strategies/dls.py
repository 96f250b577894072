from strategies.base import SearchAlgorithm
from strategies.dfs import DepthFirstSearch, DepthPolicy


class DepthLimitedSearch(SearchAlgorithm):
    """A DFS in which states beyond the depth limit are never pushed.

    Failing to find a goal that only exists deeper than the limit is the
    expected outcome, not an error.
    """

    name = "DLS"

    def __init__(self, depth_limit, root, goal, heuristic=None):
        super().__init__(root, goal, heuristic)
        if depth_limit is None:
            raise ValueError("DepthLimitedSearch needs a depth limit; use DepthFirstSearch for none")
        self._engine = DepthFirstSearch(root, goal, heuristic, policy=DepthPolicy(depth_limit))

    @property
    def depth_limit(self):
        return self._engine.policy.depth_limit

    def search(self):
        self._reset_results()
        self._engine.search()
        self._nodes_expanded = self._engine.get_nodes_expanded()
        if self._engine.goal_found():
            self._goal_found = True
            self._goal_depth = self._engine.get_goal_depth()
            self._goal_cost = self._engine.get_goal_cost()
            self._goal_path = self._engine.get_goal_path()

    def __repr__(self):
        return f"DepthLimitedSearch(depth_limit={self.depth_limit}, root={self.root!r}, goal={self.goal!r})"
