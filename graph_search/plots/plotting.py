# graph_search/plots/plotting.py
# Side-by-side bar charts of SearchResult rows: nodes expanded, path cost, time and peak memory.
from __future__ import annotations
import math

import matplotlib.pyplot as plt


def bar_compare(results, title="Search Comparison"):
    names = [r.algo for r in results]
    nodes = [r.nodes_expanded for r in results]
    # unreachable goals have infinite cost; draw them as 0
    costs = [r.cost if math.isfinite(r.cost) else 0 for r in results]
    times = [r.time_s for r in results]
    mems  = [r.peak_kb or 0 for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded")
    axs[1].bar(names, costs); axs[1].set_title("Path Cost")
    axs[2].bar(names, times); axs[2].set_title("Time (s)")
    axs[3].bar(names, mems); axs[3].set_title("Peak Memory (KB)")
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig
