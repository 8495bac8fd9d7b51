# graph_search/cli.py
# Command-line driver: run one search on the illustrative 5-node graph and print the path.
from __future__ import annotations
import argparse
import sys

from .algorithms import ALGORITHMS, resolve, search
from .config import setup_logging
from .core.errors import GraphError
from .problems.sample import ILLUSTRATIVE_GOAL, make_illustrative_graph


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="graph_search",
        description="Uninformed search on a small weighted digraph.",
        epilog="BFS: Breadth-First Search  DFS: Depth-First Search  UCS: Uniform-Cost Search",
    )
    ap.add_argument("algorithm", help=f"one of {', '.join(ALGORITHMS)} (case-insensitive)")
    ap.add_argument("--goal", type=int, default=ILLUSTRATIVE_GOAL, help="goal node (default: %(default)s)")
    ap.add_argument("--start", type=int, default=0, help="start node (default: %(default)s)")
    ap.add_argument("--limit", type=int, default=None, help="DFS depth limit (default: node count)")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging({0: None, 1: "INFO"}.get(args.verbose, "DEBUG"))

    try:
        name = resolve(args.algorithm)
        graph = make_illustrative_graph(start=args.start)
        solution = search(graph, args.goal, name, limit=args.limit)
    except GraphError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"{args.algorithm} solution:")
    print(" ".join(str(n) for n in solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
