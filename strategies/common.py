from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


def reconstruct_path(came_from, current):
    """Reconstructs the path (root first) from a predecessor map.

    The root maps to None, or is simply absent from the map.
    """
    path = [current]
    while came_from.get(current) is not None:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


@dataclass(frozen=True, eq=False)
class SearchEntry(Generic[T]):
    """One node's search-time metadata.

    `payload` carries whatever a particular strategy needs (the DFS family
    stores its "already expanded" flag there). Entries order by
    total_cost + heuristic_estimate, so a heap of entries gives uniform-cost
    search with a zero heuristic and A* otherwise.
    """

    state: Any
    predecessor: Optional[Any]
    depth: int
    total_cost: float
    heuristic_estimate: float = 0.0
    payload: Optional[T] = None

    @classmethod
    def root(cls, state, heuristic_estimate=0.0, payload=None):
        return cls(state, None, 0, 0.0, heuristic_estimate, payload)

    def child(self, successor, edge_cost, heuristic_estimate=0.0, payload=None):
        """Entry for `successor`, reached from this entry along one edge."""
        return SearchEntry(
            successor,
            self.state,
            self.depth + 1,
            self.total_cost + edge_cost,
            heuristic_estimate,
            payload,
        )

    def with_payload(self, payload):
        return SearchEntry(
            self.state,
            self.predecessor,
            self.depth,
            self.total_cost,
            self.heuristic_estimate,
            payload,
        )

    @property
    def priority(self):
        return self.total_cost + self.heuristic_estimate

    def __lt__(self, other):
        return self.priority < other.priority

    def __le__(self, other):
        return self.priority <= other.priority

    def __gt__(self, other):
        return self.priority > other.priority

    def __ge__(self, other):
        return self.priority >= other.priority
