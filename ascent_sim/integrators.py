"""
Ascent Kernel - Numerical Integration

This module implements the unit-step ascent integrators and the RK4 step
used by the orbit propagator.

The ascent steps are semi-implicit Euler: velocity is updated from the
acceleration first, then position from the new velocity. Swapping that
order changes every recorded trajectory.
"""

import logging
from typing import Callable, Tuple

import numpy as np

from . import constants as C
from .forces import compute_drag, compute_drag_vector, compute_gravity, compute_gravity_vector
from .mass import update_mass
from .phases import gravity_turn_impulse, thrust_ratio_2d, thrust_ratio_3d
from .state import State
from .types import FlightSample, VerticalStep
from .utils import set_length

logger = logging.getLogger(__name__)

Derivative = Callable[[float, np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]


def step_trajectory(state: State, config) -> Tuple[State, FlightSample]:
    """
    Advance the 3D ascent by one unit step.

    Order of operations:
    1. drag opposing velocity, from speed and altitude
    2. gravity towards the planet centre
    3. prograde thrust scaled by the active phase
    4. mass flow, with the depletion clamp
    5. v += a, then r += v
    6. ground clamp
    7. gravity-turn impulse at its exact step

    Args:
        state: Current state (not modified)
        config: VehicleConfig

    Returns:
        (next_state, sample) with next_state.t = state.t + 1
    """
    t = state.t
    r = state.r.copy()
    v = state.v.copy()

    drag_vec = compute_drag_vector(r, v, config.cd, config.area)
    g = compute_gravity(float(np.linalg.norm(r)))
    grav_vec = compute_gravity_vector(r)

    thrust_vec = set_length(v, config.thrust * thrust_ratio_3d(config.phases, t))

    commanded = float(np.linalg.norm(thrust_vec))
    m, applied = update_mass(state.m, commanded, config.isp, g, config.end_mass)
    if applied != commanded:
        logger.debug(f"Propellant exhausted at t={t:.0f}s")
        thrust_vec = np.zeros_like(thrust_vec)

    acc_vec = (thrust_vec + drag_vec) / m + grav_vec

    v = v + acc_vec
    r = r + v

    if np.linalg.norm(r) < C.R_EARTH:
        r = set_length(r, C.R_EARTH)
        v = np.zeros_like(v)

    impulse = gravity_turn_impulse(config.phases, t)
    if impulse is not None:
        logger.debug(f"Gravity turn at t={t:.0f}s: dv={impulse}")
        v = v + impulse

    sample = FlightSample.create(
        time=t, position=r, velocity=v, gravity=grav_vec,
        drag=drag_vec, thrust=thrust_vec, mass=m,
    )
    return State(r=r, v=v, m=m, t=t + C.DT), sample


def step_vertical(state: State, config) -> Tuple[State, VerticalStep]:
    """
    Advance the graph-mode (vertical 2D) ascent by one unit step.

    Motion is along +y only. Drag is a signed scalar opposing the vertical
    velocity; thrust always points up. The depletion clamp here triggers
    only when the mass falls strictly below the dry mass.

    Args:
        state: Current state with 2D vectors (not modified)
        config: VehicleConfig

    Returns:
        (next_state, step) with next_state.t = state.t + 1
    """
    t = state.t
    r = state.r.copy()
    v = state.v.copy()

    drag = compute_drag(float(np.linalg.norm(v)), float(np.linalg.norm(r)) - C.R_EARTH,
                        config.cd, config.area)
    g = compute_gravity(float(np.linalg.norm(r)))

    thrust = config.thrust * thrust_ratio_2d(config.phases, t)
    m, thrust = update_mass(state.m, thrust, config.isp, g, config.end_mass, strict=True)

    twr = thrust / (m * g)
    acc = (thrust + (drag if v[1] < 0 else -drag)) / m - g

    v = v + np.array([0.0, acc])
    r = r + v

    return State(r=r, v=v, m=m, t=t + C.DT), VerticalStep(acc, g, thrust, twr)


def rk4_step(f: Derivative, t: float, r: np.ndarray, v: np.ndarray,
             h: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Perform a single RK4 integration step of a second-order system.

    The RK4 method computes:
    k1 = f(t, y)
    k2 = f(t + h/2, y + h/2 * k1)
    k3 = f(t + h/2, y + h/2 * k2)
    k4 = f(t + h, y + h * k3)
    y_new = y + h/6 * (k1 + 2*k2 + 2*k3 + k4)

    with y = (r, v) and f returning (dr/dt, dv/dt).

    Args:
        f: Derivative function f(t, r, v) -> (r_dot, v_dot)
        t: Current time (s)
        r: Position (m)
        v: Velocity (m/s)
        h: Step size (s)

    Returns:
        (r_new, v_new), fresh arrays
    """
    k1_r, k1_v = f(t, r, v)
    k2_r, k2_v = f(t + 0.5 * h, r + 0.5 * h * k1_r, v + 0.5 * h * k1_v)
    k3_r, k3_v = f(t + 0.5 * h, r + 0.5 * h * k2_r, v + 0.5 * h * k2_v)
    k4_r, k4_v = f(t + h, r + h * k3_r, v + h * k3_v)

    r_new = r + (h / 6.0) * (k1_r + 2 * k2_r + 2 * k3_r + k4_r)
    v_new = v + (h / 6.0) * (k1_v + 2 * k2_v + 2 * k3_v + k4_v)
    return r_new, v_new
