import argparse
import logging
import sys
import time
import tracemalloc

import psutil

import constants
from strategies import make_search
from util import EuclideanHeuristic, GraphReader, format_bytes

logger = logging.getLogger(__name__)


def verbose_search(algorithm, print_path=True):
    """Conducts a search, printing the time taken and the result.

    Only the public accessors of `algorithm` are used.
    """
    t0 = time.perf_counter()
    algorithm.search()
    print(f"Time taken: {(time.perf_counter() - t0) * 1000:.0f}ms")

    if algorithm.goal_found():
        print(f"Arrived at {algorithm.goal} for cost {algorithm.get_goal_cost():.2f} "
              f"at depth {algorithm.get_goal_depth()}")
        if print_path:
            print(f"Path taken:{algorithm.get_goal_path()}")
    else:
        print("Failed to find the goal!")


def _execute_with_metrics(run_fn):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    try:
        result = run_fn()
    finally:
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
    return result, dt, peak, proc.memory_info().rss


def build_search(graph, method, goal_id, depth_limit=None, max_depth=None):
    """Build the search for one origin/destination pair of `graph`."""
    key = constants.METHODS[method.upper()]
    if key == "IDS" and max_depth is None:
        # no simple path is deeper than the node count, so this bound loses no answer
        max_depth = graph.node_count()
    heuristic = EuclideanHeuristic(graph, goal_id) if key in constants.INFORMED_METHODS else None
    return make_search(key, graph.state(graph.origin), graph.state(goal_id), heuristic,
                       depth_limit=depth_limit, max_depth=max_depth)


def solve(graph, method, depth_limit=None, max_depth=None):
    """Search towards every destination and keep the cheapest goal reached.

    Returns (goal_id, search, nodes_expanded); goal_id and search are None
    when no destination was reached. Ties on cost go to the lowest node id.
    """
    best = None
    nodes_expanded = 0
    for goal_id in sorted(graph.destinations):
        algorithm = build_search(graph, method, goal_id, depth_limit, max_depth)
        algorithm.search()
        nodes_expanded += algorithm.get_nodes_expanded()
        if not algorithm.goal_found():
            logger.debug("%s did not reach destination %s", algorithm.name, goal_id)
            continue
        if best is None or algorithm.get_goal_cost() < best[1].get_goal_cost():
            best = (goal_id, algorithm)
    if best is None:
        return None, None, nodes_expanded
    return best[0], best[1], nodes_expanded


def _read_problem(filename, nodes_csv=None, ways_csv=None):
    graph = GraphReader(filename).read_problem()
    if nodes_csv or ways_csv:
        graph.read_csv(nodes_csv, ways_csv)
    if graph.origin is None or not graph.destinations:
        print(f"Error: {filename} needs an origin and at least one destination", file=sys.stderr)
        return None
    return graph


def _emit_metrics(metrics_mode, line):
    if metrics_mode == "stdout":
        print(line)
    elif metrics_mode == "stderr":
        print(line, file=sys.stderr)


def run(filename, method, metrics_mode=constants.DEFAULT_METRICS_MODE, depth_limit=None,
        max_depth=None, print_path=True, nodes_csv=None, ways_csv=None):
    """Read a problem file, search it, and print the result in the usual format:

    <filename> <method>
    Goal node reached:<goal>
    Number of Nodes visited:<n>
    <path>
    Total path cost:<cost>
    """
    graph = _read_problem(filename, nodes_csv, ways_csv)
    if graph is None:
        return 1

    method = method.upper()
    (goal_id, algorithm, nodes_expanded), runtime_s, peak_bytes, rss_after = _execute_with_metrics(
        lambda: solve(graph, method, depth_limit, max_depth))

    print(f"{filename} {method}")
    if algorithm is None:
        print(f"None {nodes_expanded} ")
        _emit_metrics(metrics_mode,
                      f"Metrics: method={method} nodes_expanded={nodes_expanded} "
                      f"runtime_ms={(runtime_s * 1000):.3f} peak_py_mem={format_bytes(peak_bytes)} "
                      f"rss_now={format_bytes(rss_after)}")
        return 0

    total_cost = algorithm.get_goal_cost()
    print(f"Goal node reached:{goal_id}")
    print(f"Number of Nodes visited:{nodes_expanded}")
    if print_path:
        print(" -> ".join(str(s) for s in algorithm.get_goal_path()))
    print(f"Total path cost:{total_cost:g}")
    _emit_metrics(metrics_mode,
                  f"Metrics: method={method} nodes_expanded={nodes_expanded} "
                  f"path_cost={total_cost:g} depth={algorithm.get_goal_depth()} "
                  f"runtime_ms={(runtime_s * 1000):.3f} peak_py_mem={format_bytes(peak_bytes)} "
                  f"rss_now={format_bytes(rss_after)}")
    return 0


def report(filename, method, depth_limit=None, max_depth=None, print_path=True,
           nodes_csv=None, ways_csv=None):
    """Print a timed verbose report for each destination of the problem."""
    graph = _read_problem(filename, nodes_csv, ways_csv)
    if graph is None:
        return 1
    for goal_id in sorted(graph.destinations):
        algorithm = build_search(graph, method, goal_id, depth_limit, max_depth)
        print(f"{algorithm.name}: {graph.origin} -> {goal_id}")
        verbose_search(algorithm, print_path)
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run a state-space search on a problem file")
    parser.add_argument("filename", help="Problem file (Nodes:, Edges:, Origin:, Destinations: sections)")
    parser.add_argument("method", type=str.upper, choices=sorted(constants.METHODS),
                        help="Search method")
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const", const="stderr",
                         default=constants.DEFAULT_METRICS_MODE, help="Print a metrics line to stderr")
    metrics.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const", const="stdout",
                         help="Print a metrics line to stdout")
    parser.add_argument("--nodes-csv", default=None, help="CSV of extra nodes (id, lat, lon)")
    parser.add_argument("--ways-csv", default=None,
                        help="CSV of extra ways (from, to, base_time[, final_time])")
    parser.add_argument("--depth-limit", type=int, default=None, help="Depth limit for DLS")
    parser.add_argument("--max-depth", type=int, default=None, help="Give up IDS after this limit")
    parser.add_argument("--no-path", dest="print_path", action="store_false", help="Do not print the path")
    parser.add_argument("--report", action="store_true", help="Print a timed report per destination")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=constants.LOG_FORMAT)

    if constants.METHODS[args.method] == "DLS" and args.depth_limit is None:
        print("Error: DLS needs --depth-limit", file=sys.stderr)
        return 2

    try:
        if args.report:
            return report(args.filename, args.method, args.depth_limit, args.max_depth, args.print_path,
                          args.nodes_csv, args.ways_csv)
        return run(args.filename, args.method, args.metrics_mode, args.depth_limit,
                   args.max_depth, args.print_path, args.nodes_csv, args.ways_csv)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename or args.filename}", file=sys.stderr)
        return 1
    except KeyError as e:
        print(f"Error: unknown node {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    # e.g., python search.py problem.txt DFS --metrics
    sys.exit(main())
