# Command line method names -> strategies.STRATEGIES keys
METHODS = {
    "BFS": "BFS",
    "DFS": "DFS",
    "DLS": "DLS",
    "IDS": "IDS",
    "AS": "AS",
    "ASTAR": "AS",
    "UCS": "UCS",
    "CUS1": "UCS",
    "DIJKSTRA": "UCS",
}

# Methods that take the Euclidean heuristic when run from the command line
INFORMED_METHODS = {"AS"}

DEFAULT_METRICS_MODE = "none"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
