# graph_search/problems/sample.py
# The small 5-node weighted digraph used by the CLI and the benchmarks.
from __future__ import annotations
from typing import Tuple

from ..core.graph import Graph

# (source, target, weight), in insertion order; order matters for BFS/DFS tie-breaking
ILLUSTRATIVE_EDGES: Tuple[Tuple[int, int, int], ...] = (
    (0, 2, 5),
    (0, 1, 1),
    (1, 2, 1),
    (2, 0, 1),
    (2, 3, 1),
    (2, 4, 5),
    (3, 4, 1),
)
ILLUSTRATIVE_NODES = 5
ILLUSTRATIVE_GOAL = 4


def make_illustrative_graph(start: int = 0) -> Graph:
    """
    0 -> 2 (5), 0 -> 1 (1), 1 -> 2 (1), 2 -> 0 (1), 2 -> 3 (1), 2 -> 4 (5), 3 -> 4 (1)

    From 0 to 4: BFS gives [0, 2, 4] (2 edges, cost 10), UCS gives [0, 1, 2, 3, 4] (cost 4).
    """
    return Graph.from_edges(ILLUSTRATIVE_NODES, ILLUSTRATIVE_EDGES, start=start)
