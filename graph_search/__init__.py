"""Uninformed search (BFS, depth-limited DFS, UCS) over a weighted directed graph."""

from .algorithms import (
    breadth_first_search,
    depth_first_search,
    run_measured,
    search,
    uniform_cost_search,
)
from .core.errors import GraphError, InvalidSize, NodeOutOfRange, UnknownAlgorithm
from .core.graph import Edge, Graph
from .core.metrics import SearchResult

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Edge",
    "GraphError",
    "InvalidSize",
    "NodeOutOfRange",
    "UnknownAlgorithm",
    "SearchResult",
    "breadth_first_search",
    "depth_first_search",
    "uniform_cost_search",
    "search",
    "run_measured",
]
