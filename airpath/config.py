"""Shared configuration: paths, trace limits, policy constants, logging setup."""

import logging
import os
from pathlib import Path

from airpath.graph.weights import WeightPolicy

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Env vars:
# - AIRPATH_GRAPH_FILE            -> network JSON served by the HTTP host
# - AIRPATH_TRACE_STEP_CAP        -> max snapshots per trace
# - AIRPATH_TRACE_EXPANSION_LIMIT -> max neighbours relaxed per traced step
# - AIRPATH_DELAY_MULTIPLIER      -> delay multiplier for low-frequency routes
# - AIRPATH_FREQUENCY_BONUS       -> additive bonus for high-frequency routes
# - AIRPATH_LOG_LEVEL             -> DEBUG / INFO / WARNING ...
_default_graph_file = PROJECT_ROOT / "data" / "graph.json"
GRAPH_FILE = Path(os.getenv("AIRPATH_GRAPH_FILE", _default_graph_file))

TRACE_STEP_CAP = int(os.getenv("AIRPATH_TRACE_STEP_CAP", 15))
TRACE_EXPANSION_LIMIT = int(os.getenv("AIRPATH_TRACE_EXPANSION_LIMIT", 3))

DELAY_MULTIPLIER = float(os.getenv("AIRPATH_DELAY_MULTIPLIER", 2000))
FREQUENCY_BONUS = float(os.getenv("AIRPATH_FREQUENCY_BONUS", -5000))

LOG_LEVEL = os.getenv("AIRPATH_LOG_LEVEL", "INFO")


def default_policy() -> WeightPolicy:
    """The weight policy with any environment overrides applied."""
    return WeightPolicy(
        low_frequency_delay_multiplier=DELAY_MULTIPLIER,
        high_frequency_bonus=FREQUENCY_BONUS,
    )


def setup_logging(level=None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("airpath")
