"""
Ascent Kernel - Mass flow and propellant bookkeeping.
"""

from typing import Tuple

from .forces import compute_mass_flow


def update_mass(m: float, thrust: float, isp: float, g: float, end_mass: float,
                strict: bool = False) -> Tuple[float, float]:
    """
    Consume one step of propellant and apply the depletion clamp.

    Depletion is terminal for thrust only: the mass is clamped to end_mass,
    the thrust for this step is zeroed and the run continues.

    Args:
        m: Mass before the step (kg)
        thrust: Commanded thrust magnitude (N)
        isp: Specific impulse (s)
        g: Local gravity used by the mass-flow model (m/s^2)
        end_mass: Dry mass (kg)
        strict: Graph-mode rule; clamp only when the mass falls strictly
            below end_mass, regardless of thrust. Otherwise clamp when the
            mass reaches end_mass while thrust is nonzero.

    Returns:
        (mass, thrust) after the step
    """
    m = m - compute_mass_flow(thrust, isp, g)

    if strict:
        depleted = m < end_mass
    else:
        depleted = m <= end_mass and thrust > 0

    if depleted:
        return end_mass, 0.0
    return m, thrust


def is_propellant_exhausted(m: float, end_mass: float) -> bool:
    """True if current mass is at/below dry mass."""
    return m <= end_mass


def get_propellant_fraction(m: float, config) -> float:
    """
    Fraction of usable propellant remaining, in [0, 1].
    """
    remaining = max(0.0, m - config.end_mass)
    return min(1.0, remaining / config.propellant_mass)
