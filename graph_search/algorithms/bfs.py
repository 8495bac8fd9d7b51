# graph_search/algorithms/bfs.py
# Breadth-first search: fewest edges from the graph's start node to the goal. Edge weights are ignored.
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from ..core.frontiers import FIFOQueue
from ..core.graph import Graph, Node
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)


def breadth_first_search(graph: Graph, goal: Node, stats: Optional[dict] = None) -> List[Node]:
    """
    Returns the minimum-hop path [start, ..., goal], or [] when the goal is unreachable.
    The goal test happens when a node is discovered, not when it is expanded.
    start == goal also returns [].
    """
    start = graph.start
    graph.validate(goal)
    logger.info("BFS start=%d goal=%d", start, goal)
    if start == goal:
        logger.warning("Starting position is the destination (node %d)", start)
        return []

    frontier = FIFOQueue()
    frontier.push(start)
    explored = set()
    parents: Dict[Node, Node] = {}
    expanded = 0

    try:
        while frontier:
            node = frontier.pop()
            explored.add(node)
            expanded += 1
            for child, _ in graph.adjacent(node):
                if child in explored or child in frontier:
                    continue
                parents[child] = node
                if child == goal:
                    path = reconstruct_path(parents, start, goal)
                    logger.info("BFS found %s after %d expansions", path, expanded)
                    return path
                frontier.push(child)
    finally:
        if stats is not None:
            stats["nodes_expanded"] = expanded

    logger.info("BFS: no path from %d to %d", start, goal)
    return []
