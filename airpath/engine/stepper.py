"""
stepper.py — Trace Replay Cursor
================================
Walks a finished Trace for a presentation layer: next / prev / goto /
rewind, plus timer-driven auto-play.  It only ever reads
`trace.snapshots`; replaying never re-runs the search.

State machine:
    PAUSED   →  play()   →  PLAYING
    PLAYING  →  pause()  →  PAUSED
    PLAYING  →  (last snapshot shown) → FINISHED
    any      →  rewind() →  PAUSED

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread (or one
  event loop).
"""

import time
from enum import Enum
from typing import Callable, Optional

from airpath.engine.recorder import Trace
from airpath.engine.snapshot import Snapshot


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,
    "medium": 0.4,
    "fast":   0.15,
    "turbo":  0.05,
}


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        trace       : The Trace being replayed.
        state       : Current StepperState.
        current_idx : Index of the snapshot currently shown.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Snapshot) fired whenever the shown
                      snapshot changes.
    """

    def __init__(
        self,
        trace: Trace,
        on_step: Optional[Callable[[Snapshot], None]] = None,
        speed: str = "medium",
    ):
        self.trace:       Trace        = trace
        self.on_step                   = on_step
        self.speed:       float        = SPEED_PRESETS.get(speed, SPEED_PRESETS["medium"])
        self.state:       StepperState = StepperState.PAUSED
        self.current_idx: int          = 0
        self._last_tick:  float        = 0.0
        self._notify()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one snapshot.  Returns False if already at the end."""
        if self.current_idx >= len(self.trace) - 1:
            self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        """Go back one snapshot.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        if 0 <= idx < len(self.trace):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Back to step 0, paused."""
        self.state = StepperState.PAUSED
        self._goto(0)

    def jump_to_end(self) -> None:
        self._goto(len(self.trace) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state == StepperState.FINISHED:
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and `speed`
        seconds have passed since the last advance, shows the next
        snapshot.  Returns True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current(self) -> Snapshot:
        return self.trace[self.current_idx]

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify()

    def _notify(self) -> None:
        if self.on_step is not None:
            self.on_step(self.current)
