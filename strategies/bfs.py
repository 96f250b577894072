import logging
from collections import deque

from strategies.base import SearchAlgorithm
from strategies.common import SearchEntry, reconstruct_path

logger = logging.getLogger(__name__)


class BreadthFirstSearch(SearchAlgorithm):
    """Breadth-First Search that does not revisit states.

    The predecessor map doubles as the visited set: a state is recorded the
    first time it is dequeued, which is via a minimum-depth path.
    """

    name = "BFS"

    def search(self):
        self._reset_results()
        heuristic = self.heuristic
        goal = self.goal

        came_from = {}
        q = deque([SearchEntry.root(self.root, heuristic.estimate(self.root))])
        logger.debug("BFS from %r to %r", self.root, goal)

        while q:
            entry = q.popleft()
            node = entry.state
            # stale duplicate, already reached by an earlier entry
            if node in came_from:
                continue
            came_from[node] = entry.predecessor
            self._nodes_expanded += 1

            if node == goal:
                self._record_goal(entry, reconstruct_path(came_from, node))
                logger.debug("BFS reached goal at depth %d", entry.depth)
                return

            for succ in node.successors():
                if succ not in came_from:
                    q.append(entry.child(succ, node.cost(succ), heuristic.estimate(succ)))

        logger.debug("BFS frontier exhausted after %d states", self._nodes_expanded)
