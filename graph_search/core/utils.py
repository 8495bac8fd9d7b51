# graph_search/core/utils.py
# Path helpers shared by the searches: rebuilding a path from a parent map and pricing it.
from __future__ import annotations
from typing import Dict, List, Sequence

from .graph import Graph, Node


def reconstruct_path(parents: Dict[Node, Node], start: Node, goal: Node) -> List[Node]:
    path = [goal]
    cur = goal
    while cur != start:
        cur = parents[cur]
        path.append(cur)
    path.reverse()
    return path


def path_cost(graph: Graph, path: Sequence[Node]) -> float:
    """Total weight along `path`, taking the cheapest edge between consecutive nodes."""
    cost = 0.0
    for a, b in zip(path, path[1:]):
        w = graph.edge_weight(a, b)
        if w is None:
            raise ValueError(f"path {list(path)!r} uses missing edge {a} -> {b}")
        cost += float(w)
    return cost


def is_valid_path(graph: Graph, path: Sequence[Node]) -> bool:
    return all(n in graph for n in path) and all(graph.has_edge(a, b) for a, b in zip(path, path[1:]))
