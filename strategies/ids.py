import itertools
import logging

from strategies.base import SearchAlgorithm
from strategies.dls import DepthLimitedSearch

logger = logging.getLogger(__name__)


class IterativeDeepeningSearch(SearchAlgorithm):
    """Successive depth-limited searches with limits 0, 1, 2, ...

    Each limit is a fresh search from scratch. Without `max_depth` this never
    returns if the goal is unreachable; with it, the search gives up after the
    limit `max_depth` has been tried.
    """

    name = "IDS"

    def __init__(self, root, goal, heuristic=None, max_depth=None):
        super().__init__(root, goal, heuristic)
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_depth = max_depth
        self.depths_tried = []

    def search(self):
        self._reset_results()
        self.depths_tried = []
        if self.max_depth is None:
            limits = itertools.count()
        else:
            limits = range(self.max_depth + 1)

        for depth_limit in limits:
            logger.debug("Depth: %d", depth_limit)
            self.depths_tried.append(depth_limit)
            dls = DepthLimitedSearch(depth_limit, self.root, self.goal, self.heuristic)
            dls.search()
            self._nodes_expanded += dls.get_nodes_expanded()
            if dls.goal_found():
                self._goal_found = True
                self._goal_depth = dls.get_goal_depth()
                self._goal_cost = dls.get_goal_cost()
                self._goal_path = dls.get_goal_path()
                return

        logger.debug("IDS gave up after depth limit %d", self.max_depth)
