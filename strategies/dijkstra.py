from strategies.astar import AStarSearch


class UniformCostSearch(AStarSearch):
    """Uniform-cost (Dijkstra) search: A* with the always-zero heuristic."""

    name = "UCS"

    def __init__(self, root, goal, heuristic=None):
        # any heuristic passed in is ignored
        super().__init__(root, goal)
