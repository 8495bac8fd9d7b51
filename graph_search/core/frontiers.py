# graph_search/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque
from typing import Dict, Hashable, List, Tuple


class FIFOQueue:
    """Queue with O(1) membership, so BFS can skip nodes already waiting."""
    def __init__(self):
        self.q = deque()
        self.members = set()
    def push(self, x):
        self.q.append(x)
        self.members.add(x)
    def pop(self):
        x = self.q.popleft()
        self.members.discard(x)
        return x
    def __len__(self): return len(self.q)
    def __contains__(self, x): return x in self.members
    def peek(self): return self.q[0]


class PriorityQueue:
    """
    Min-heap of items keyed by cost, with decrease-key.
    Ties go to the item pushed first; decrease() keeps the item's original rank.
    Superseded heap entries are dropped lazily on pop.
    """
    def __init__(self):
        self.h: List[Tuple[float, int, Hashable]] = []
        self.cost: Dict[Hashable, float] = {}
        self.rank: Dict[Hashable, int] = {}
        self.counter = 0  # tie-breaker for stability

    def push(self, x, cost: float):
        if x in self.cost:
            raise KeyError(f"{x!r} is already queued")
        self.counter += 1
        self.cost[x] = cost
        self.rank[x] = self.counter
        heapq.heappush(self.h, (cost, self.counter, x))

    def decrease(self, x, cost: float) -> bool:
        """Lower x's cost. Returns False (and changes nothing) unless `cost` is strictly lower."""
        if cost >= self.cost[x]:
            return False
        self.cost[x] = cost
        heapq.heappush(self.h, (cost, self.rank[x], x))
        return True

    def pop(self) -> Tuple[Hashable, float]:
        while self.h:
            cost, _, x = heapq.heappop(self.h)
            if self.cost.get(x) == cost:
                del self.cost[x]
                del self.rank[x]
                return x, cost
        raise IndexError("pop from empty priority queue")

    def peek(self) -> Tuple[Hashable, float]:
        while self.h:
            cost, _, x = self.h[0]
            if self.cost.get(x) == cost:
                return x, cost
            heapq.heappop(self.h)
        raise IndexError("peek at empty priority queue")

    def __len__(self): return len(self.cost)
    def __contains__(self, x): return x in self.cost
