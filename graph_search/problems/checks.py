from __future__ import annotations
from collections import deque
from numbers import Real

from ..core.graph import Graph


def sanity_check_graph(graph: Graph) -> str:
    """Walks the graph breadth-first from start and checks every weight is a non-negative number."""
    seen = {graph.start}
    q = deque([graph.start])
    while q:
        s = q.popleft()
        for t, w in graph.adjacent(s):
            if isinstance(w, bool) or not isinstance(w, Real) or w != w:
                raise AssertionError(f"weight {w!r} on edge {s} -> {t} is not a number")
            if w < 0:
                raise AssertionError(f"negative weight {w} on edge {s} -> {t}; UCS needs w >= 0")
            if t not in seen:
                seen.add(t)
                q.append(t)
    return f"OK: reached {len(seen)} of {graph.node_count} nodes; all weights non-negative."
