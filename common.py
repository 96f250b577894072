from abc import ABC, abstractmethod


class State(ABC):
    """A state within a state space.

    Any state should be uniquely identifiable (hashable, comparable by
    equality), and it should be able to list its successors and the cost of
    moving to each. States should be immutable where possible.
    """

    @abstractmethod
    def successors(self):
        """Returns the successors of this state, in a fixed order."""

    @abstractmethod
    def cost(self, successor):
        """Returns the cost of moving directly from this state to `successor`.

        Behaviour is undefined if there is no such edge.
        """


class Heuristic(ABC):
    """Estimates the remaining cost from a state to the goal.

    For A* to return an optimal path the heuristic must be admissible: it
    should never overestimate the true cost of reaching the goal.
    """

    @abstractmethod
    def estimate(self, state):
        """Returns a non-negative estimate of the cost to the goal."""

    def __call__(self, state):
        return self.estimate(state)


class ZeroHeuristic(Heuristic):
    """Always estimates zero; A* with this heuristic is a uniform-cost search."""

    def estimate(self, state):
        return 0.0

    def __repr__(self):
        return "ZeroHeuristic()"


class _FunctionHeuristic(Heuristic):
    def __init__(self, fn):
        self.fn = fn

    def estimate(self, state):
        return float(self.fn(state))

    def __repr__(self):
        return f"_FunctionHeuristic({self.fn!r})"


def as_heuristic(heuristic):
    """Coerce None, a Heuristic or a plain callable into a Heuristic."""
    if heuristic is None:
        return ZeroHeuristic()
    if isinstance(heuristic, Heuristic):
        return heuristic
    if callable(heuristic):
        return _FunctionHeuristic(heuristic)
    raise TypeError(f"Expected a Heuristic or callable, got {type(heuristic).__name__}")
