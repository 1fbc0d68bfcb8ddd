"""Tests for the batch drivers."""
import dataclasses

import pytest
import numpy as np
from ascent_sim import trajectory, phases
from ascent_sim import constants as C
from ascent_sim.config import create_test_config
from ascent_sim.forces import compute_dynamic_pressure
from ascent_sim.types import CHANNELS
from ascent_sim.validation import InvalidConfiguration


@pytest.fixture
def record():
    return trajectory.calculate_trajectory(create_test_config(end=20.0))


# ============================================================================
# Graph mode
# ============================================================================

def test_graph_mode_records_every_channel(record):
    assert len(record) == 20
    for name, points in record.channels().items():
        assert len(points) == 20, name

def test_graph_mode_sample_times(record):
    assert record.times() == tuple(float(t) for t in range(1, 21))

def test_graph_mode_climbs_under_thrust(record):
    assert record.meta.thrust_section == record.times()
    assert record.meta.coast_section == ()
    assert record.meta.impact is None
    altitudes = [p.value for p in record.altitude]
    assert all(b > a for a, b in zip(altitudes, altitudes[1:]))

def test_graph_mode_dynamic_pressure_channel(record):
    for alt, vel, q in zip(record.altitude, record.velocity, record.dynamic_pressure):
        assert q.value == pytest.approx(compute_dynamic_pressure(vel.value, alt.value))

def test_graph_mode_mass_decreases(record):
    masses = [p.value for p in record.mass]
    assert all(b < a for a, b in zip(masses, masses[1:]))

def test_graph_mode_timestep_sampling():
    rec = trajectory.calculate_trajectory(create_test_config(end=20.0, timestep=5.0))
    assert rec.times() == (5.0, 10.0, 15.0, 20.0)

def test_graph_mode_start_gates_recording():
    rec = trajectory.calculate_trajectory(create_test_config(start=10.0, end=20.0))
    assert rec.times() == tuple(float(t) for t in range(11, 21))

def test_graph_mode_impact():
    rec = trajectory.calculate_trajectory(create_test_config(isp=1.0))
    assert rec.meta.impact is not None
    assert rec.meta.impact.time == 1.0
    assert rec.meta.impact.velocity > 0.0
    assert rec.meta.coast_section == (1.0,)
    assert rec.meta.thrust_section == ()
    assert rec.altitude[-1].value == 0.0
    assert len(rec) == 1

def test_graph_mode_velocity_is_signed_vertical_velocity():
    rec = trajectory.calculate_trajectory(create_test_config(end=10000.0, isp=C.F9_ISP))
    impact = rec.meta.impact
    assert impact is not None
    assert impact.velocity > 0.0
    assert min(p.value for p in rec.velocity) < 0.0
    assert rec.velocity[-1].value == pytest.approx(-impact.velocity)
    assert rec.dynamic_pressure[-1].value >= 0.0

def test_graph_mode_max_q_throttle():
    cfg = create_test_config(phases=(phases.max_q(5.0, 10.0, 0.5),))
    rec = trajectory.calculate_trajectory(cfg)
    thrust = {p.time: p.value for p in rec.thrust}
    assert thrust[5.0] == cfg.thrust
    assert thrust[6.0] == pytest.approx(0.5 * cfg.thrust)
    assert thrust[9.0] == pytest.approx(0.5 * cfg.thrust)
    assert thrust[10.0] == cfg.thrust

def test_graph_mode_invalid_config():
    with pytest.raises(InvalidConfiguration):
        trajectory.calculate_trajectory(create_test_config(end=-1.0))

def test_graph_mode_is_deterministic():
    cfg = create_test_config(end=30.0)
    assert trajectory.calculate_trajectory(cfg) == trajectory.calculate_trajectory(cfg)


# ============================================================================
# 3D
# ============================================================================

def test_3d_sample_count_and_times():
    samples = trajectory.calculate_trajectory_3d(create_test_config(end=20.0))
    assert len(samples) == 20
    assert [s.time for s in samples] == [float(t) for t in range(20)]

def test_3d_respects_start():
    samples = trajectory.calculate_trajectory_3d(create_test_config(start=5.0, end=8.0))
    assert [s.time for s in samples] == [5.0, 6.0, 7.0]

def test_3d_mass_never_below_dry_mass():
    cfg = create_test_config(end=600.0)
    samples = trajectory.calculate_trajectory_3d(cfg)
    assert all(s.mass >= cfg.end_mass for s in samples)
    assert samples[-1].mass == cfg.end_mass

def test_3d_invalid_config():
    cfg = dataclasses.replace(create_test_config(), isp=0.0)
    with pytest.raises(InvalidConfiguration):
        trajectory.calculate_trajectory_3d(cfg)

def test_3d_stays_on_launch_axis_without_turn():
    samples = trajectory.calculate_trajectory_3d(create_test_config(end=50.0))
    positions = np.array([s.position for s in samples])
    np.testing.assert_array_equal(positions[:, 0], 0.0)
    np.testing.assert_array_equal(positions[:, 2], 0.0)
    assert samples[-1].altitude > 0.0
