import time

import pytest

from airpath.engine import Stepper, StepperState, trace


@pytest.fixture
def tr(triangle):
    return trace(triangle, "A", "C", positions={"A": (0, 0), "B": (5, 0), "C": (10, 0)})


def test_starts_on_step_zero_and_notifies(tr):
    seen = []
    s = Stepper(tr, on_step=seen.append)
    assert s.current is tr[0]
    assert s.state == StepperState.PAUSED
    assert seen == [tr[0]]


def test_next_and_prev(tr):
    s = Stepper(tr)
    assert s.prev_step() is False
    assert s.next_step() is True
    assert s.current.step_index == 1
    assert s.prev_step() is True
    assert s.current.step_index == 0


def test_runs_off_the_end_into_finished(tr):
    s = Stepper(tr)
    while s.next_step():
        pass
    assert s.is_finished
    assert s.current is tr.final


def test_goto_jump_and_rewind(tr):
    s = Stepper(tr)
    assert s.goto_step(2)
    assert s.current.current_node == "B"
    assert not s.goto_step(99)
    s.jump_to_end()
    assert s.is_finished and s.current is tr.final
    s.rewind()
    assert s.state == StepperState.PAUSED
    assert s.current_idx == 0


def test_tick_advances_only_while_playing(tr):
    s = Stepper(tr, speed="fast")
    far_future = time.monotonic() + 100
    assert s.tick(now=far_future) is False

    s.play()
    assert s.is_playing
    assert s.tick(now=far_future) is True
    assert s.current_idx == 1
    # not enough time since the last advance
    assert s.tick(now=far_future) is False

    s.toggle_play()
    assert s.state == StepperState.PAUSED


def test_play_does_nothing_once_finished(tr):
    s = Stepper(tr)
    s.jump_to_end()
    s.play()
    assert s.is_finished and not s.is_playing


def test_replay_reads_the_same_snapshots(tr):
    first, second = [], []
    s = Stepper(tr, on_step=first.append)
    while s.next_step():
        pass
    s.on_step = second.append
    s.rewind()
    while s.next_step():
        pass
    assert first == second
