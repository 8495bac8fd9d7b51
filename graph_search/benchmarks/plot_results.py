# graph_search/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..config import RESULTS_DIR


def _load_rows(results_json: Path):
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: python -m graph_search.benchmarks.run_all")
    data = json.loads(results_json.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)


def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos)

    top = max(vals) or 1
    for xi, v in zip(x, vals):
        if isinstance(v, float) and v < 0.01:
            label = f"{v:.4f}"
        elif isinstance(v, float):
            label = f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def fmt_table(rows) -> str:
    # Markdown table
    lines = [
        "| Algorithm | Path | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        path = " ".join(str(n) for n in r.get("path") or []) or "-"
        lines.append(
            f"| {r['algo']} | {path} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    plt.close(fig)
    return buf.getvalue()


def main(out_dir: Path = RESULTS_DIR):
    out_dir = Path(out_dir)
    rows = _load_rows(out_dir / "results.json")

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    charts = [
        ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
        ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
        ("cost", "Path Cost (lower is better)", "cost", "cost.png"),
    ]
    written = [md_path]
    for metric, title, ylabel, filename in charts:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        path = out_dir / filename
        path.write_bytes(fig_to_png_bytes(fig))
        print(f"Wrote {path}")
        written.append(path)
    return written


if __name__ == "__main__":
    main()
