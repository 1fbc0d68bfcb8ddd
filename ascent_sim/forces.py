"""
Ascent Kernel - Force Computations

This module implements all force and environment models:
- Exponential atmosphere
- Inverse-square gravity
- Dynamic pressure and aerodynamic drag
- Propellant mass flow
"""

import numpy as np

from . import constants as C
from .utils import set_length
from .validation import InvalidConfiguration


# =============================================================================
# ATMOSPHERE MODEL (exponential)
# =============================================================================

def compute_atmosphere_density(altitude: float) -> float:
    """
    Air density at the given altitude.

    rho = rho0 * exp(-h / H)

    No clamping: negative altitudes extrapolate above rho0 and large
    altitudes decay towards zero.

    Args:
        altitude: Altitude above the surface (m)

    Returns:
        Density (kg/m^3)
    """
    return C.RHO_0 * np.exp(-altitude / C.H_SCALE)


# =============================================================================
# FORCE MODELS
# =============================================================================

def compute_gravity(r: float, mu: float = C.MU_EARTH) -> float:
    """
    Gravitational acceleration magnitude at distance r from the centre.

    g = mu / r^2

    Raises:
        InvalidConfiguration: if r is zero
    """
    if r == 0:
        raise InvalidConfiguration("Gravity is undefined at the planet centre (r = 0)")
    return mu / r ** 2


def compute_dynamic_pressure(v: float, altitude: float) -> float:
    """q = rho(h) * v^2 / 2  (Pa)"""
    rho = compute_atmosphere_density(altitude)
    return rho * v ** 2 / 2


def compute_drag(v: float, altitude: float, cd: float, area: float) -> float:
    """
    Aerodynamic drag magnitude.

    F_drag = Cd * A * q

    Returns:
        Drag force (N), acting opposite to the velocity
    """
    return cd * area * compute_dynamic_pressure(v, altitude)


def compute_mass_flow(thrust: float, isp: float, g: float) -> float:
    """
    Propellant consumed during one unit step.

    mdot = T / (Isp * g)

    NOTE: known modelling defect, kept on purpose. Isp is referenced to
    standard surface gravity, so the divisor should be Isp * g0. Using the
    local g here makes consumption grow with altitude. Recorded trajectories
    depend on this formula; do not change it without re-baselining them.

    Args:
        thrust: Applied thrust magnitude (N)
        isp: Specific impulse (s)
        g: Local gravitational acceleration (m/s^2)

    Returns:
        Mass flow (kg/s)
    """
    return thrust / (isp * g)


# =============================================================================
# VECTOR FORMS (3D path)
# =============================================================================

def compute_altitude(r: np.ndarray) -> float:
    """Altitude above the surface for a planet-centred position (m)."""
    return float(np.linalg.norm(r)) - C.R_EARTH


def compute_gravity_vector(r: np.ndarray, mu: float = C.MU_EARTH) -> np.ndarray:
    """
    Gravitational acceleration vector, pointing at the planet centre.

    Args:
        r: Position vector (m)

    Returns:
        Acceleration vector (m/s^2)
    """
    g = compute_gravity(float(np.linalg.norm(r)), mu)
    return set_length(-np.asarray(r, dtype=np.float64), g)


def compute_drag_vector(r: np.ndarray, v: np.ndarray, cd: float, area: float) -> np.ndarray:
    """
    Drag force vector opposing the velocity.

    Zero when the velocity is zero.

    Returns:
        Drag force vector (N)
    """
    drag = compute_drag(float(np.linalg.norm(v)), compute_altitude(r), cd, area)
    return set_length(-np.asarray(v, dtype=np.float64), drag)
