import heapq
import itertools
import logging

from strategies.base import SearchAlgorithm
from strategies.common import SearchEntry, reconstruct_path

logger = logging.getLogger(__name__)


class AStarSearch(SearchAlgorithm):
    """A* search ordered by total_cost + heuristic_estimate.

    States are deduplicated by best known cost: a cheaper path to a state that
    was already seen updates its predecessor and re-inserts it, and heap
    entries that have since been beaten are skipped when popped. The returned
    path is cost-optimal as long as the heuristic is admissible.
    """

    name = "AS"

    def search(self):
        self._reset_results()
        heuristic = self.heuristic
        goal = self.goal

        g_score = {self.root: 0.0}
        came_from = {self.root: None}
        counter = itertools.count()
        start = SearchEntry.root(self.root, heuristic.estimate(self.root))
        heap = [(start.priority, next(counter), start)]
        logger.debug("%s from %r to %r", self.name, self.root, goal)

        while heap:
            _f, _cnt, entry = heapq.heappop(heap)
            node = entry.state
            if entry.total_cost > g_score[node]:
                continue
            self._nodes_expanded += 1

            if node == goal:
                self._record_goal(entry, reconstruct_path(came_from, node))
                logger.debug("%s reached goal for cost %s", self.name, entry.total_cost)
                return

            for succ in node.successors():
                child = entry.child(succ, node.cost(succ), heuristic.estimate(succ))
                if child.total_cost < g_score.get(succ, float("inf")):
                    g_score[succ] = child.total_cost
                    came_from[succ] = node
                    heapq.heappush(heap, (child.priority, next(counter), child))

        logger.debug("%s frontier exhausted after %d expansions", self.name, self._nodes_expanded)
