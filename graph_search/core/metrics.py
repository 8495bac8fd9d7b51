# graph_search/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Optional
import time, tracemalloc


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[int] = field(default_factory=list)
    cost: float = float("inf")
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    def to_dict(self) -> dict:
        row = asdict(self)
        # json has no infinity
        if row["cost"] == float("inf"):
            row["cost"] = None
        return row


class MeasuredRun:
    """Wall time and tracemalloc peak around one search; readable mid-run as well as after."""
    def __init__(self) -> None:
        self.started = 0.0
        self.finished: Optional[float] = None
        self.owns_trace = False
        self.final_peak_kb = 0

    def __enter__(self) -> "MeasuredRun":
        # an outer meter already tracing keeps its trace running
        self.owns_trace = not tracemalloc.is_tracing()
        if self.owns_trace:
            tracemalloc.start()
        self.started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.finished = time.perf_counter()
        self.final_peak_kb = self.peak_kb
        if self.owns_trace:
            tracemalloc.stop()
        return False

    @property
    def elapsed(self) -> float:
        end = self.finished if self.finished is not None else time.perf_counter()
        return end - self.started

    @property
    def peak_kb(self) -> int:
        if self.finished is None and tracemalloc.is_tracing():
            return tracemalloc.get_traced_memory()[1] // 1024
        return self.final_peak_kb
