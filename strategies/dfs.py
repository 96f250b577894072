import logging

from strategies.base import SearchAlgorithm
from strategies.common import SearchEntry

logger = logging.getLogger(__name__)


class DepthPolicy:
    """Decides which entries the DFS engine may push onto its stack.

    With `depth_limit=None` every entry is admitted; otherwise entries deeper
    than the limit are dropped as though they had no successors.
    """

    def __init__(self, depth_limit=None):
        if depth_limit is not None and depth_limit < 0:
            raise ValueError(f"depth_limit must be non-negative, got {depth_limit}")
        self.depth_limit = depth_limit

    def admits(self, entry):
        return self.depth_limit is None or entry.depth <= self.depth_limit

    def __repr__(self):
        return f"DepthPolicy(depth_limit={self.depth_limit!r})"


UNLIMITED = DepthPolicy()


def run_depth_first(root, goal, policy=UNLIMITED):
    """Stack-based DFS that avoids cycles along the current path only.

    Expanded states are put back on the stack underneath their successors with
    payload True, so popping one means we are backtracking past it.

    Returns (goal_entry, path, nodes_expanded); goal_entry and path are None
    when the stack is exhausted without reaching the goal.
    """
    stack = []
    path_stack = []
    path_set = set()
    nodes_expanded = 0

    def push(entry):
        if policy.admits(entry):
            stack.append(entry)

    push(SearchEntry.root(root, payload=False))

    while stack:
        entry = stack.pop()

        if entry.payload:
            # backtracking: the state is no longer on the current path
            path_set.discard(path_stack.pop())
            continue

        node = entry.state
        if node == goal:
            path_stack.append(node)
            return entry, list(path_stack), nodes_expanded

        push(entry.with_payload(True))
        path_stack.append(node)
        path_set.add(node)
        nodes_expanded += 1

        for succ in node.successors():
            if succ in path_set:
                continue
            push(entry.child(succ, node.cost(succ), 0.0, False))

    return None, None, nodes_expanded


class DepthFirstSearch(SearchAlgorithm):
    """Depth-First Search over the current path.

    The same state can be searched several times if it is reachable along
    different paths; only cycles within one path are avoided.
    """

    name = "DFS"

    def __init__(self, root, goal, heuristic=None, policy=UNLIMITED):
        super().__init__(root, goal, heuristic)
        self.policy = policy

    def search(self):
        self._reset_results()
        logger.debug("%s from %r to %r (%r)", self.name, self.root, self.goal, self.policy)
        entry, path, expanded = run_depth_first(self.root, self.goal, self.policy)
        self._nodes_expanded = expanded
        if entry is not None:
            self._record_goal(entry, path)
            logger.debug("%s reached goal at depth %d", self.name, entry.depth)
        else:
            logger.debug("%s stack exhausted after %d expansions", self.name, expanded)
