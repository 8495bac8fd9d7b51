# graph_search/core/graph.py
# Weighted directed graph over integer nodes 0..N-1, the state space every search walks.
from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .errors import InvalidSize, NodeOutOfRange

logger = logging.getLogger(__name__)

Node = int


def _is_index(x) -> bool:
    # bool is an int subclass but never a node
    return isinstance(x, int) and not isinstance(x, bool)


class Edge(NamedTuple):
    target: Node
    weight: float


class Graph:
    """
    Static weighted digraph.

    - Nodes: the integers 0..n-1 (no separate node objects)
    - adjacent(n): outgoing (target, weight) pairs in the order they were added;
      BFS/DFS enumerate children in exactly this order
    - start: the initial state of every search run on this graph

    Edges can only be added. Build the graph completely before searching it.
    """
    def __init__(self, n: int, start: Node = 0):
        if not _is_index(n) or n <= 0:
            raise InvalidSize(f"node count must be a positive integer, got {n!r}")
        if not _is_index(start) or not 0 <= start < n:
            raise InvalidSize(f"start node {start!r} is outside [0, {n})")
        self._n = n
        self._start = start
        self._adj: List[List[Edge]] = [[] for _ in range(n)]

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Tuple[Node, Node, float]], start: Node = 0) -> "Graph":
        g = cls(n, start)
        for source, target, weight in edges:
            g.add_edge(source, target, weight)
        return g

    @property
    def start(self) -> Node:
        return self._start

    @property
    def node_count(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def __contains__(self, node) -> bool:
        return _is_index(node) and 0 <= node < self._n

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, start={self._start}, edges={self.edge_count()})"

    def validate(self, node) -> Node:
        """Return `node` unchanged, or raise NodeOutOfRange."""
        if node not in self:
            raise NodeOutOfRange(node, self._n)
        return node

    def add_edge(self, source: Node, target: Node, weight: float) -> None:
        self.validate(source)
        self.validate(target)
        self._adj[source].append(Edge(target, weight))
        logger.debug("edge %d -> %d (w=%s)", source, target, weight)

    def adjacent(self, node: Node) -> Tuple[Edge, ...]:
        return tuple(self._adj[self.validate(node)])

    def edges(self) -> Iterator[Tuple[Node, Node, float]]:
        for source, out in enumerate(self._adj):
            for target, weight in out:
                yield source, target, weight

    def edge_count(self) -> int:
        return sum(len(out) for out in self._adj)

    def has_edge(self, source: Node, target: Node) -> bool:
        return self.edge_weight(source, target) is not None

    def edge_weight(self, source: Node, target: Node) -> Optional[float]:
        """Weight of the cheapest source->target edge, or None if there is none."""
        self.validate(target)
        weights = [w for t, w in self.adjacent(source) if t == target]
        return min(weights) if weights else None
