"""
Configuration for graph_search.

Tunables are module constants, each overridable through an environment variable.
"""

import logging
import os
from pathlib import Path

# =============================================================================
# Paths
# =============================================================================

PACKAGE_ROOT = Path(__file__).parent

# Where run_all.py writes results.json and plot_results.py writes charts
RESULTS_DIR = Path(os.getenv("GRAPH_SEARCH_RESULTS_DIR", PACKAGE_ROOT / "benchmarks"))

# =============================================================================
# Search
# =============================================================================

# Depth limit used by the DFS benchmark run; 0 means "use the node count"
DLS_LIMIT = int(os.getenv("GRAPH_SEARCH_DLS_LIMIT", "0"))

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv("GRAPH_SEARCH_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level=None) -> None:
    """Configure the root logger. Only entry points call this; the library never does."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
