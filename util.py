import logging
import math

import pandas as pd

from common import Heuristic, State

logger = logging.getLogger(__name__)


def euclidean(a, b):
    """Euclidean distance between coordinate tuples a and b."""
    (x1, y1), (x2, y2) = a, b
    return math.hypot(x1 - x2, y1 - y2)


class Graph:
    """A directed, weighted graph whose nodes may carry plane coordinates.

    Also records the origin and destinations of a routing problem.
    """

    def __init__(self):
        self.coordinates = {}     # {node_id: (x, y)}
        self.adjacency = {}       # {from_node_id: [(to_node_id, cost), ...]}
        self.origin = None
        self.destinations = set()

    def add_node(self, node_id, x=None, y=None):
        if x is not None and y is not None:
            self.coordinates[node_id] = (x, y)
        self.adjacency.setdefault(node_id, [])

    def add_edge(self, from_id, to_id, cost):
        self.adjacency.setdefault(from_id, []).append((to_id, cost))
        self.adjacency.setdefault(to_id, [])

    def get_coordinates(self, node_id):
        return self.coordinates.get(node_id)

    def node_count(self):
        return len(self.adjacency)

    def neighbours(self, node_id):
        """Distinct successor ids of a node, in ascending id order."""
        return sorted({to_id for to_id, _ in self.adjacency.get(node_id, [])})

    def edge_cost(self, from_id, to_id):
        """Cost of the cheapest direct edge from_id -> to_id."""
        costs = [cost for neighbor, cost in self.adjacency.get(from_id, []) if neighbor == to_id]
        if not costs:
            raise ValueError(f"No edge from {from_id} to {to_id}")
        return min(costs)

    def state(self, node_id):
        """The search state for a node of this graph."""
        if node_id not in self.adjacency:
            raise KeyError(node_id)
        return GraphState(self, node_id)

    def add_frames(self, nodes_df=None, ways_df=None):
        """Add nodes and ways held in DataFrames.

        Args:
            nodes_df: DataFrame of nodes (index: node id, columns: lat, lon)
            ways_df: DataFrame of ways (columns: from, to, base_time[, final_time])
        """
        if nodes_df is not None:
            for node_id, row in nodes_df.iterrows():
                self.add_node(int(node_id), float(row['lat']), float(row['lon']))
        if ways_df is not None:
            has_final = 'final_time' in ways_df.columns
            for _, row in ways_df.iterrows():
                cost = row['final_time'] if has_final and pd.notna(row['final_time']) else row['base_time']
                self.add_edge(int(row['from']), int(row['to']), float(cost))
        return self

    def read_csv(self, nodes_csv=None, ways_csv=None):
        """Add nodes/ways from CSV tables (nodes: id, lat, lon; ways: from, to, base_time[, final_time])."""
        nodes_df = pd.read_csv(nodes_csv, index_col="id") if nodes_csv else None
        ways_df = pd.read_csv(ways_csv) if ways_csv else None
        return self.add_frames(nodes_df, ways_df)

    @classmethod
    def from_frames(cls, nodes_df, ways_df):
        return cls().add_frames(nodes_df, ways_df)


class GraphState(State):
    """A node of a Graph, seen as a search state."""

    __slots__ = ("graph", "node_id")

    def __init__(self, graph, node_id):
        object.__setattr__(self, "graph", graph)
        object.__setattr__(self, "node_id", node_id)

    def __setattr__(self, name, value):
        raise AttributeError("GraphState is immutable")

    def successors(self):
        return [GraphState(self.graph, to_id) for to_id in self.graph.neighbours(self.node_id)]

    def cost(self, successor):
        return self.graph.edge_cost(self.node_id, successor.node_id)

    def __eq__(self, other):
        if not isinstance(other, GraphState):
            return NotImplemented
        return self.graph is other.graph and self.node_id == other.node_id

    def __hash__(self):
        return hash(self.node_id)

    def __repr__(self):
        return str(self.node_id)


class EuclideanHeuristic(Heuristic):
    """Straight-line distance from a state's node to the goal node.

    Admissible when every edge costs at least the distance between its ends.
    """

    def __init__(self, graph, goal_id):
        self.graph = graph
        self.goal_coords = graph.get_coordinates(goal_id)

    def estimate(self, state):
        coords = self.graph.get_coordinates(state.node_id)
        if coords is None or self.goal_coords is None:
            return 0.0
        return euclidean(coords, self.goal_coords)


class GraphReader:
    """Handles parsing the problem file."""

    def __init__(self, filename):
        self.filename = filename
        self.graph = Graph()

    def read_problem(self):
        """Reads the file and populates the Graph object.

        Raises FileNotFoundError if the file does not exist; malformed lines
        are logged and skipped.
        """
        with open(self.filename, 'r') as f:
            lines = [line.strip() for line in f if line.strip()]

        current_section = None

        for line in lines:
            # Determining which section of the file its currently reading
            if line.startswith("Nodes:"):
                current_section = "NODES"
                continue
            elif line.startswith("Edges:"):
                current_section = "EDGES"
                continue
            elif line.startswith("Origin:"):
                current_section = "ORIGIN"
                # Origin may sit on the header line itself: "Origin: 2"
                line = line[len("Origin:"):].strip()
                if not line:
                    continue
            elif line.startswith("Destinations:"):
                current_section = "DESTINATIONS"
                line = line[len("Destinations:"):].strip()
                if not line:
                    continue

            if current_section == "NODES":
                # Example: 1: (4,1)
                try:
                    parts = line.split(':')
                    node_id = int(parts[0].strip())
                    coords_str = parts[1].strip().strip('()')
                    x, y = map(int, coords_str.split(','))
                    self.graph.add_node(node_id, x, y)
                except (IndexError, ValueError) as e:
                    logger.warning("Error parsing node line '%s': %s", line, e)

            elif current_section == "EDGES":
                # Example: (2,1): 4
                try:
                    parts = line.split(':')
                    cost = float(parts[1].strip())
                    nodes_str = parts[0].strip().strip('()')
                    from_id, to_id = map(int, nodes_str.split(','))
                    self.graph.add_edge(from_id, to_id, cost)
                except (IndexError, ValueError) as e:
                    logger.warning("Error parsing edge line '%s': %s", line, e)

            elif current_section == "ORIGIN":
                try:
                    self.graph.origin = int(line)
                except ValueError as e:
                    logger.warning("Error parsing origin line '%s': %s", line, e)

            elif current_section == "DESTINATIONS":
                # Example: 5; 4
                try:
                    dest_ids = [int(d.strip()) for d in line.split(';') if d.strip()]
                    self.graph.destinations.update(dest_ids)
                except ValueError as e:
                    logger.warning("Error parsing destinations line '%s': %s", line, e)

            else:
                logger.warning("Ignoring line outside any section: '%s'", line)

        return self.graph


def format_bytes(n_bytes):
    """Human-readable size with 2 decimals, e.g. 2048 -> '2.00 KB'."""
    if n_bytes < 1024:
        return f"{n_bytes} B"
    size = float(n_bytes)
    for unit in ("KB", "MB", "GB"):
        size /= 1024.0
        if size < 1024 or unit == "GB":
            return f"{size:.2f} {unit}"
