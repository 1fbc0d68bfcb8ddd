"""
Ascent Kernel - Two-Body Orbit Propagation

Point-mass gravity only: no drag, no thrust, no perturbations.
"""

import functools
import logging
from typing import List, Tuple

import numpy as np

from . import constants as C
from .integrators import rk4_step
from .validation import check_position_nonzero, check_step_size

logger = logging.getLogger(__name__)

OrbitHistory = List[Tuple[np.ndarray, np.ndarray]]


def two_body_derivative(t: float, r: np.ndarray, v: np.ndarray,
                        mu: float = C.MU_EARTH) -> Tuple[np.ndarray, np.ndarray]:
    """
    Equations of motion of the two-body problem.

    r_dot = v
    v_dot = -mu * r / |r|^3

    Time does not appear; it is accepted for the RK4 signature.
    """
    r_mag = np.linalg.norm(r)
    return v, -mu * r / r_mag ** 3


def circular_velocity(r: float, mu: float = C.MU_EARTH) -> float:
    """Speed of a circular orbit of radius r (m/s)."""
    return float(np.sqrt(mu / r))


def propagate_orbit(r, v, tspan: float = C.ORBIT_TSPAN, dt: float = C.ORBIT_DT,
                    mu: float = C.MU_EARTH) -> OrbitHistory:
    """
    Propagate an orbit with fixed-step RK4.

    The step count is int(tspan / dt), truncated; a trailing partial step
    is not taken.

    Args:
        r: Initial position (m)
        v: Initial velocity (m/s)
        tspan: Propagation span (s)
        dt: Step size (s)
        mu: Gravitational parameter (m^3/s^2)

    Returns:
        List of (position, velocity) pairs; entry k is at time k * dt and
        entry 0 is the initial condition

    Raises:
        InvalidConfiguration: if dt <= 0, tspan < 0 or r is the zero vector
    """
    r = np.array(r, dtype=np.float64)
    v = np.array(v, dtype=np.float64)
    check_step_size(tspan, dt)
    check_position_nonzero(r)

    f = functools.partial(two_body_derivative, mu=mu)
    steps = int(tspan / dt)
    logger.debug(f"Propagating orbit: {steps} steps of {dt}s")

    history = [(r, v)]
    t = 0.0
    for _ in range(steps):
        r, v = rk4_step(f, t, r, v, dt)
        t += dt
        history.append((r, v))

    return history


def create_demo_orbits(altitude: float = C.DEMO_ORBIT_ALTITUDE,
                       tspan: float = C.DEMO_ORBIT_TSPAN,
                       dt: float = C.DEMO_ORBIT_DT,
                       mu: float = C.MU_EARTH) -> List[OrbitHistory]:
    """
    Three circular orbits at the same altitude in different planes.

    Starting on the +x axis, the velocity points along +y, +z and the
    diagonal y = z respectively, each at circular speed.
    """
    radius = C.R_EARTH + altitude
    speed = circular_velocity(radius, mu)
    r0 = np.array([radius, 0.0, 0.0])
    directions = (
        np.array([0.0, 1.0, 0.0]),
        np.array([0.0, 0.0, 1.0]),
        np.array([0.0, 1.0, 1.0]) / np.sqrt(2.0),
    )
    return [propagate_orbit(r0, d * speed, tspan, dt, mu) for d in directions]
