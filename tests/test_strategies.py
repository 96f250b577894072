import pytest

from conftest import names
from strategies import (
    STRATEGIES,
    AStarSearch,
    BreadthFirstSearch,
    DepthFirstSearch,
    DepthLimitedSearch,
    DepthPolicy,
    IterativeDeepeningSearch,
    UniformCostSearch,
    make_search,
)
from util import EuclideanHeuristic


def test_bfs_takes_first_discovered_path(diamond):
    bfs = BreadthFirstSearch(diamond("A"), diamond("D"))
    bfs.search()
    assert bfs.goal_found()
    assert names(bfs.get_goal_path()) == ["A", "B", "D"]
    assert bfs.get_goal_depth() == 2
    assert bfs.get_goal_cost() == 2.0
    assert bfs.get_nodes_expanded() == 4


def test_dfs_explores_last_successor_first(diamond):
    dfs = DepthFirstSearch(diamond("A"), diamond("D"))
    dfs.search()
    assert dfs.goal_found()
    assert names(dfs.get_goal_path()) == ["A", "C", "D"]
    assert dfs.get_goal_depth() == 2
    assert dfs.get_goal_cost() == 6.0


def test_ucs_is_cost_optimal(diamond):
    ucs = UniformCostSearch(diamond("A"), diamond("D"))
    ucs.search()
    assert ucs.goal_found()
    assert names(ucs.get_goal_path()) == ["A", "B", "D"]
    assert ucs.get_goal_cost() == 2.0
    assert ucs.get_goal_depth() == 2


def test_dls_below_goal_depth_fails(diamond):
    dls = DepthLimitedSearch(1, diamond("A"), diamond("D"))
    dls.search()
    assert not dls.goal_found()


def test_dls_at_goal_depth_matches_dfs(diamond):
    dls = DepthLimitedSearch(2, diamond("A"), diamond("D"))
    dls.search()
    assert dls.goal_found()
    assert names(dls.get_goal_path()) == ["A", "C", "D"]
    assert dls.depth_limit == 2


def test_dls_rejects_negative_limit(diamond):
    with pytest.raises(ValueError):
        DepthLimitedSearch(-1, diamond("A"), diamond("D"))


def test_dls_requires_a_limit(diamond):
    with pytest.raises(ValueError, match="depth limit"):
        DepthLimitedSearch(None, diamond("A"), diamond("D"))


def test_ids_tries_each_limit_until_success(diamond):
    ids = IterativeDeepeningSearch(diamond("A"), diamond("D"))
    ids.search()
    assert ids.depths_tried == [0, 1, 2]
    assert ids.goal_found()
    assert ids.get_goal_depth() == 2
    assert names(ids.get_goal_path()) == ["A", "C", "D"]
    assert ids.get_goal_cost() == 6.0


def test_ids_with_max_depth_gives_up(diamond):
    ids = IterativeDeepeningSearch(diamond("A"), diamond("D"), max_depth=1)
    ids.search()
    assert not ids.goal_found()
    assert ids.depths_tried == [0, 1]


@pytest.mark.parametrize("cls", [BreadthFirstSearch, DepthFirstSearch, UniformCostSearch,
                                 IterativeDeepeningSearch, AStarSearch])
def test_root_is_goal(cls, diamond):
    algorithm = cls(diamond("B"), diamond("B"))
    algorithm.search()
    assert algorithm.goal_found()
    assert names(algorithm.get_goal_path()) == ["B"]
    assert algorithm.get_goal_depth() == 0
    assert algorithm.get_goal_cost() == 0.0


@pytest.mark.parametrize("cls", [BreadthFirstSearch, DepthFirstSearch, UniformCostSearch, AStarSearch])
def test_unreachable_goal_fails(cls, diamond):
    algorithm = cls(diamond("D"), diamond("A"))
    algorithm.search()
    assert not algorithm.goal_found()
    assert algorithm.get_goal_path() == []


def test_accessors_before_search_return_defaults(diamond):
    bfs = BreadthFirstSearch(diamond("A"), diamond("D"))
    assert not bfs.goal_found()
    assert bfs.get_goal_depth() == 0
    assert bfs.get_goal_cost() == 0.0
    assert bfs.get_goal_path() == []


def test_goal_path_is_a_copy(diamond):
    bfs = BreadthFirstSearch(diamond("A"), diamond("D"))
    bfs.search()
    bfs.get_goal_path().clear()
    assert len(bfs.get_goal_path()) == 3


def test_dfs_cycles_only_avoided_along_path():
    from conftest import Vertex

    # D is reachable from both B and C, and B <-> C forms a cycle
    adjacency = {
        "A": [("B", 1), ("C", 1)],
        "B": [("C", 1), ("D", 1)],
        "C": [("B", 1)],
        "D": [],
    }
    dfs = DepthFirstSearch(Vertex(adjacency, "A"), Vertex(adjacency, "D"))
    dfs.search()
    assert dfs.goal_found()
    # C is explored first, then B from C, then D from B
    assert names(dfs.get_goal_path()) == ["A", "C", "B", "D"]
    assert dfs.get_goal_cost() == 3


def test_depth_policy():
    from strategies.common import SearchEntry

    shallow = SearchEntry("x", None, 2, 0.0)
    deep = SearchEntry("x", None, 3, 0.0)
    assert DepthPolicy().admits(deep)
    assert DepthPolicy(2).admits(shallow)
    assert not DepthPolicy(2).admits(deep)


def test_astar_with_euclidean_heuristic_matches_ucs(grid_graph):
    root, goal = grid_graph.state(1), grid_graph.state(9)
    astar = AStarSearch(root, goal, EuclideanHeuristic(grid_graph, 9))
    ucs = UniformCostSearch(root, goal)
    astar.search()
    ucs.search()
    assert astar.get_goal_cost() == ucs.get_goal_cost() == 4
    assert astar.get_goal_depth() == 4
    assert astar.get_nodes_expanded() <= ucs.get_nodes_expanded()


def test_astar_reinserts_on_cheaper_path():
    from conftest import Vertex

    # C is first seen through the expensive edge, then improved through B
    adjacency = {
        "A": [("C", 10), ("B", 1)],
        "B": [("C", 1)],
        "C": [("D", 1)],
        "D": [],
    }
    astar = AStarSearch(Vertex(adjacency, "A"), Vertex(adjacency, "D"))
    astar.search()
    assert names(astar.get_goal_path()) == ["A", "B", "C", "D"]
    assert astar.get_goal_cost() == 3


def test_ucs_ignores_heuristic(diamond):
    ucs = UniformCostSearch(diamond("A"), diamond("D"), heuristic=lambda s: 100.0)
    assert ucs.heuristic.estimate(diamond("A")) == 0.0


def test_make_search(diamond):
    assert set(STRATEGIES) == {"BFS", "DFS", "DLS", "IDS", "AS", "UCS"}
    assert isinstance(make_search("bfs", diamond("A"), diamond("D")), BreadthFirstSearch)
    dls = make_search("DLS", diamond("A"), diamond("D"), depth_limit=3)
    assert dls.depth_limit == 3
    ids = make_search("IDS", diamond("A"), diamond("D"), max_depth=4)
    assert ids.max_depth == 4
    with pytest.raises(ValueError):
        make_search("DLS", diamond("A"), diamond("D"))
    with pytest.raises(ValueError):
        make_search("BEAM", diamond("A"), diamond("D"))
