"""Tests for the streaming driver."""
import itertools

import pytest
import numpy as np
from ascent_sim import streaming, trajectory
from ascent_sim.config import create_test_config
from ascent_sim.types import FlightSample
from ascent_sim.validation import InvalidConfiguration


class FakeClock:
    """Millisecond clock advancing by a fixed step on every read."""

    def __init__(self, step_ms: float):
        self._ticks = itertools.count(0.0, step_ms)

    def __call__(self) -> float:
        return next(self._ticks)


def test_one_step_per_admitted_call():
    samples = []
    stream = streaming.StreamingTrajectory(
        create_test_config(end=5.0), samples.append, clock=FakeClock(20.0))

    results = [stream() for _ in range(6)]

    assert results == [True, True, True, True, True, False]
    assert [s.time for s in samples] == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
    assert all(isinstance(s, FlightSample) for s in samples)
    assert stream.done
    assert stream.steps == 6

def test_finished_stream_stays_finished():
    samples = []
    stream = streaming.StreamingTrajectory(
        create_test_config(end=2.0), samples.append, clock=FakeClock(20.0))
    while stream.advance():
        pass
    assert not stream.advance()
    assert not stream()
    assert len(samples) == 3

def test_pacing_gate_blocks_fast_calls():
    samples = []
    stream = streaming.StreamingTrajectory(
        create_test_config(end=5.0), samples.append, clock=lambda: 1000.0)

    assert stream() is True
    assert stream() is True
    assert stream() is True
    assert samples == []
    assert stream.state.t == 0.0

def test_pacing_gate_interval():
    samples = []
    stream = streaming.StreamingTrajectory(
        create_test_config(end=50.0), samples.append, clock=FakeClock(4.0))
    for _ in range(9):
        stream()
    # armed at 0, calls read 4, 8, ...: steps admitted at 12, 24, 36
    assert len(samples) == 3

def test_custom_min_interval():
    samples = []
    stream = streaming.StreamingTrajectory(
        create_test_config(end=50.0), samples.append, clock=FakeClock(4.0),
        min_interval_ms=0.0)
    for _ in range(5):
        stream()
    assert len(samples) == 5

def test_stream_matches_batch():
    cfg = create_test_config(end=20.0)
    streamed = []
    stream = streaming.StreamingTrajectory(cfg, streamed.append, clock=FakeClock(20.0))
    while stream():
        pass
    batch = trajectory.calculate_trajectory_3d(cfg)

    assert len(streamed) == len(batch) + 1
    for a, b in zip(streamed, batch):
        assert a.time == b.time
        assert np.array_equal(a.position, b.position)
        assert np.array_equal(a.velocity, b.velocity)
        assert a.mass == b.mass

def test_invalid_config_fails_on_construction():
    with pytest.raises(InvalidConfiguration):
        streaming.StreamingTrajectory(create_test_config(end_mass=0.0), lambda s: None)

def test_run_realtime():
    samples = []
    steps = streaming.run_realtime(create_test_config(end=3.0), samples.append,
                                   frame_interval=0.0)
    assert steps == 4
    assert [s.time for s in samples] == [0.0, 1.0, 2.0, 3.0]

def test_first_step_waits_for_interval_after_arming():
    samples = []
    stream = streaming.StreamingTrajectory(
        create_test_config(end=5.0), samples.append, clock=FakeClock(5.0))
    assert stream() is True
    assert samples == []
    assert stream() is True
    assert [s.time for s in samples] == [0.0]
