# graph_search/algorithms/ucs.py
# Uniform-cost search (single-goal Dijkstra): cheapest path by total edge weight.
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from ..core.frontiers import PriorityQueue
from ..core.graph import Graph, Node
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)


def uniform_cost_search(graph: Graph, goal: Node, stats: Optional[dict] = None) -> List[Node]:
    """
    Returns the minimum-weight path [start, ..., goal], or [] when the goal is unreachable.

    The goal test happens when a node is selected from the frontier, which is what makes
    the result cost-optimal. Equal costs are broken first-inserted-wins. When a cheaper
    route to a queued node turns up, both its cost and its parent are updated.
    Weights must be non-negative. start == goal returns [].
    """
    start = graph.start
    graph.validate(goal)
    logger.info("UCS start=%d goal=%d", start, goal)
    if start == goal:
        logger.warning("Starting position is the destination (node %d)", start)
        return []

    frontier = PriorityQueue()
    frontier.push(start, 0.0)
    explored = set()
    parents: Dict[Node, Node] = {}
    expanded = 0

    try:
        while frontier:
            node, cost = frontier.pop()
            if node == goal:
                path = reconstruct_path(parents, start, goal)
                logger.info("UCS found %s (cost %s) after %d expansions", path, cost, expanded)
                return path
            explored.add(node)
            expanded += 1
            for child, weight in graph.adjacent(node):
                if child in explored:
                    continue
                child_cost = cost + float(weight)
                if child not in frontier:
                    frontier.push(child, child_cost)
                    parents[child] = node
                elif frontier.decrease(child, child_cost):
                    logger.debug("UCS relaxed %d: cost %s via %d", child, child_cost, node)
                    parents[child] = node
    finally:
        if stats is not None:
            stats["nodes_expanded"] = expanded

    logger.info("UCS: no path from %d to %d", start, goal)
    return []
