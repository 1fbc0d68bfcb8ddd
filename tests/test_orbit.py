"""Tests for two-body orbit propagation."""
import pytest
import numpy as np
from ascent_sim import orbit
from ascent_sim import constants as C
from ascent_sim.validation import InvalidConfiguration


R_ORBIT = C.R_EARTH + C.DEMO_ORBIT_ALTITUDE


@pytest.fixture
def circular_state():
    r = np.array([R_ORBIT, 0.0, 0.0])
    v = np.array([0.0, orbit.circular_velocity(R_ORBIT), 0.0])
    return r, v


def test_two_body_derivative():
    r = np.array([R_ORBIT, 0.0, 0.0])
    v = np.array([0.0, 7600.0, 0.0])
    r_dot, v_dot = orbit.two_body_derivative(0.0, r, v)
    np.testing.assert_array_equal(r_dot, v)
    assert v_dot[0] == pytest.approx(-C.MU_EARTH / R_ORBIT ** 2)
    assert np.allclose(v_dot[1:], 0.0)

def test_circular_velocity():
    assert orbit.circular_velocity(4.0, mu=16.0) == pytest.approx(2.0)
    assert 7500.0 < orbit.circular_velocity(R_ORBIT) < 7800.0

def test_history_length_truncates(circular_state):
    r, v = circular_state
    assert len(orbit.propagate_orbit(r, v, tspan=95.0, dt=10.0)) == 10
    assert len(orbit.propagate_orbit(r, v, tspan=100.0, dt=10.0)) == 11
    assert len(orbit.propagate_orbit(r, v)) == 61

def test_zero_span_returns_initial_condition(circular_state):
    r, v = circular_state
    history = orbit.propagate_orbit(r, v, tspan=0.0, dt=10.0)
    assert len(history) == 1
    np.testing.assert_array_equal(history[0][0], r)
    np.testing.assert_array_equal(history[0][1], v)

def test_circular_orbit_radius_preserved(circular_state):
    r, v = circular_state
    period = 2 * np.pi * np.sqrt(R_ORBIT ** 3 / C.MU_EARTH)
    history = orbit.propagate_orbit(r, v, tspan=period, dt=10.0)
    radii = np.array([np.linalg.norm(p) for p, _ in history])
    assert np.all(np.abs(radii - R_ORBIT) / R_ORBIT < 0.01)

def test_propagate_does_not_modify_input(circular_state):
    r, v = circular_state
    r0, v0 = r.copy(), v.copy()
    orbit.propagate_orbit(r, v, tspan=100.0, dt=10.0)
    np.testing.assert_array_equal(r, r0)
    np.testing.assert_array_equal(v, v0)

def test_propagate_custom_mu():
    history = orbit.propagate_orbit([1.0, 0.0, 0.0], [0.0, 1.0, 0.0],
                                    tspan=2 * np.pi, dt=0.01, mu=1.0)
    r_final = history[-1][0]
    assert np.linalg.norm(r_final) == pytest.approx(1.0, rel=1e-6)

def test_propagate_invalid_inputs(circular_state):
    r, v = circular_state
    with pytest.raises(InvalidConfiguration):
        orbit.propagate_orbit(r, v, tspan=100.0, dt=0.0)
    with pytest.raises(InvalidConfiguration):
        orbit.propagate_orbit(r, v, tspan=-1.0, dt=10.0)
    with pytest.raises(InvalidConfiguration):
        orbit.propagate_orbit(np.zeros(3), v)

def test_create_demo_orbits():
    histories = orbit.create_demo_orbits()
    assert len(histories) == 3
    for history in histories:
        assert len(history) == 571
        np.testing.assert_allclose(history[0][0], [R_ORBIT, 0.0, 0.0])
    assert np.allclose([r[2] for r, _ in histories[0]], 0.0)
    assert np.allclose([r[1] for r, _ in histories[1]], 0.0)
