# graph_search/algorithms/__init__.py
# Name-based dispatch over the three uninformed searches, plus a measured runner for benchmarks.
from __future__ import annotations
from typing import Callable, Dict, List, Optional

from ..core.errors import GraphError, UnknownAlgorithm
from ..core.graph import Graph, Node
from ..core.metrics import MeasuredRun, SearchResult
from ..core.utils import path_cost
from .bfs import breadth_first_search
from .dfs import depth_first_search
from .ucs import uniform_cost_search

ALGORITHMS: Dict[str, Callable[..., List[Node]]] = {
    "BFS": breadth_first_search,
    "DFS": depth_first_search,
    "UCS": uniform_cost_search,
}


def resolve(name: str) -> str:
    """Canonical (upper-case) algorithm name; matching is case-insensitive."""
    key = str(name).upper()
    if key not in ALGORITHMS:
        raise UnknownAlgorithm(name, ALGORITHMS)
    return key


def search(graph: Graph, goal: Node, algorithm: str, limit: Optional[int] = None,
           stats: Optional[dict] = None) -> List[Node]:
    key = resolve(algorithm)
    if key == "DFS":
        return depth_first_search(graph, goal, limit=limit, stats=stats)
    return ALGORITHMS[key](graph, goal, stats=stats)


def run_measured(graph: Graph, goal: Node, algorithm: str, limit: Optional[int] = None) -> SearchResult:
    name = resolve(algorithm)
    stats: dict = {}
    with MeasuredRun() as meter:
        try:
            path = search(graph, goal, name, limit=limit, stats=stats)
        except GraphError as e:
            return SearchResult(name, False, [], float("inf"), stats.get("nodes_expanded", 0),
                                meter.elapsed, meter.peak_kb, error=str(e))
    cost = path_cost(graph, path) if path else float("inf")
    return SearchResult(name, bool(path), path, cost, stats.get("nodes_expanded", 0),
                        meter.elapsed, meter.peak_kb)


__all__ = [
    "ALGORITHMS",
    "breadth_first_search",
    "depth_first_search",
    "uniform_cost_search",
    "resolve",
    "search",
    "run_measured",
]
