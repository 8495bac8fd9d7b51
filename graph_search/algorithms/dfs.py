# graph_search/algorithms/dfs.py
# Depth-limited depth-first search. Returns the first path found in adjacency order, not the shortest.
from __future__ import annotations
import logging
from collections import deque
from typing import List, Optional

from ..core.graph import Graph, Node

logger = logging.getLogger(__name__)


def depth_first_search(graph: Graph, goal: Node, limit: Optional[int] = None,
                       stats: Optional[dict] = None) -> List[Node]:
    """
    DFS from graph.start, following at most `limit` edges (default: node count,
    which is enough to reach any node and keeps cycles from looping forever).
    No explored set: a node can be revisited along a cyclic branch until the budget runs out.
    Returns [] if nothing is found within the limit, or if start == goal.

    Runs on an explicit stack of (node, depth_left, children) frames, so long paths
    are not bounded by the interpreter's recursion limit.
    """
    start = graph.start
    graph.validate(goal)
    if limit is None:
        limit = graph.node_count
    if limit < 0:
        raise ValueError(f"depth limit must be >= 0, got {limit}")
    logger.info("DFS start=%d goal=%d limit=%d", start, goal, limit)
    if start == goal:
        logger.warning("Starting position is the destination (node %d)", start)
        return []

    expanded = 0
    path = deque()  # filled from the goal backwards while frames unwind

    try:
        stack = []
        if limit > 0:
            expanded += 1
            stack.append((start, limit, iter(graph.adjacent(start))))
        while stack:
            node, depth_left, children = stack[-1]
            if path:
                # a branch that looped back through start already carries the full prefix
                if path[0] != start:
                    path.appendleft(node)
                stack.pop()
                continue
            edge = next(children, None)
            if edge is None:
                stack.pop()
                continue
            child = edge.target
            if child == goal:
                path.append(child)
            elif depth_left > 1:
                expanded += 1
                stack.append((child, depth_left - 1, iter(graph.adjacent(child))))
    finally:
        if stats is not None:
            stats["nodes_expanded"] = expanded

    if path:
        logger.info("DFS found %s after %d expansions", list(path), expanded)
    else:
        logger.info("DFS: no path from %d to %d within %d edges", start, goal, limit)
    return list(path)
