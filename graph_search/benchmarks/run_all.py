# graph_search/benchmarks/run_all.py
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import List, Optional

from ..algorithms import ALGORITHMS, run_measured
from ..config import DLS_LIMIT, RESULTS_DIR, setup_logging
from ..core.graph import Graph
from ..core.metrics import SearchResult
from ..problems.checks import sanity_check_graph
from ..problems.sample import ILLUSTRATIVE_GOAL, make_illustrative_graph


def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def run_all(graph: Graph, goal: int, dls_limit: Optional[int] = None) -> List[SearchResult]:
    """Run every algorithm once on `graph`; the DFS run uses `dls_limit` (None = node count)."""
    rows = []
    for name in ALGORITHMS:
        print(f"→ Running {name} ...")
        r = run_measured(graph, goal, name, limit=dls_limit if name == "DFS" else None)
        status = "OK" if r.success else ("ERROR " + r.error if r.error else "FAIL")
        print(
            f"  {r.algo}: {status} "
            f"path={r.path} "
            f"cost={r.cost} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        rows.append(r)
    return rows


def main(out_dir: Path = RESULTS_DIR):
    setup_logging()
    graph = make_illustrative_graph()
    print(sanity_check_graph(graph))

    rows = run_all(graph, ILLUSTRATIVE_GOAL, dls_limit=DLS_LIMIT or None)

    out = {"results": [r.to_dict() for r in rows], "ts": time.time()}
    print(json.dumps(out, indent=2))

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "results.json"
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")
    return out_path


if __name__ == "__main__":
    main()
