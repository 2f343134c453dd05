"""
airpath.engine
--------------
Trace recording, replay and analytics.

    from airpath.engine import trace, TraceRecorder, Stepper, measure, compare
"""

from airpath.engine.snapshot import Snapshot, SnapshotBuilder
from airpath.engine.recorder import Trace, TraceRecorder, trace
from airpath.engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from airpath.engine.metrics  import RunMetrics, ComparisonResult, measure, timed_search, compare

__all__ = [
    "Snapshot",
    "SnapshotBuilder",
    "Trace",
    "TraceRecorder",
    "trace",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "RunMetrics",
    "ComparisonResult",
    "measure",
    "timed_search",
    "compare",
]
