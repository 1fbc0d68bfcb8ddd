"""
Ascent Kernel - Configuration Validation

Fail-fast checks run by every driver before the first step:
- Time window ordering and sampling interval
- Mass budget and engine parameters
- Phase ratios and uniqueness
- Non-degenerate position vectors for gravity / orbit evaluation

Physically expected boundaries (propellant depletion, ground contact)
are clamped by the integrators and never raise.
"""

import numpy as np

from .phases import WindowPhase


class InvalidConfiguration(ValueError):
    """Raised when a configuration cannot describe a valid simulation run."""
    pass


def check_time_window(start: float, end: float, timestep: float = 1.0) -> bool:
    """
    Verify the simulated interval and sampling interval.

    Returns:
        True if valid, raises InvalidConfiguration otherwise
    """
    if not end > start:
        raise InvalidConfiguration(
            f"End time must be after start time: start={start}, end={end}"
        )
    if not timestep > 0:
        raise InvalidConfiguration(f"Sampling interval must be positive, got {timestep}")
    return True


def check_mass_budget(start_mass: float, end_mass: float) -> bool:
    """
    Verify the vehicle carries propellant and a positive dry mass.

    Returns:
        True if valid, raises InvalidConfiguration otherwise
    """
    if not end_mass > 0:
        raise InvalidConfiguration(f"Dry mass must be positive, got {end_mass}")
    if not end_mass < start_mass:
        raise InvalidConfiguration(
            f"Dry mass must be below initial mass: "
            f"start_mass={start_mass:,.1f} kg, end_mass={end_mass:,.1f} kg"
        )
    return True


def check_engine(thrust: float, isp: float) -> bool:
    """Verify thrust is non-negative and Isp positive (mass flow divides by it)."""
    if thrust < 0:
        raise InvalidConfiguration(f"Thrust must be non-negative, got {thrust}")
    if not isp > 0:
        raise InvalidConfiguration(f"Specific impulse must be positive, got {isp}")
    return True


def check_aerodynamics(cd: float, area: float) -> bool:
    if cd < 0 or area < 0:
        raise InvalidConfiguration(
            f"Drag coefficient and reference area must be non-negative: cd={cd}, area={area}"
        )
    return True


def check_phases(phases) -> bool:
    """
    Verify window ratios lie in [0, 1] and no phase kind is configured twice.

    Windows with start > end are allowed; they simply never activate.
    """
    seen = set()
    for phase in phases:
        if phase.kind in seen:
            raise InvalidConfiguration(f"Phase '{phase.name}' configured more than once")
        seen.add(phase.kind)
        if isinstance(phase, WindowPhase) and not 0.0 <= phase.thrust_ratio <= 1.0:
            raise InvalidConfiguration(
                f"Thrust ratio of phase '{phase.name}' must be in [0, 1], "
                f"got {phase.thrust_ratio}"
            )
    return True


def check_position_nonzero(r: np.ndarray) -> bool:
    """
    Verify a position vector has non-zero length.

    Gravity and the two-body ODE are singular at the planet centre.
    """
    if np.linalg.norm(r) == 0.0:
        raise InvalidConfiguration("Position vector has zero length (planet centre)")
    return True


def check_step_size(tspan: float, dt: float) -> bool:
    """Verify the orbit propagation step and span."""
    if not dt > 0:
        raise InvalidConfiguration(f"Step size must be positive, got {dt}")
    if tspan < 0:
        raise InvalidConfiguration(f"Time span must be non-negative, got {tspan}")
    return True


def check_config(config) -> bool:
    """
    Run every configuration check.

    Args:
        config: VehicleConfig

    Returns:
        True if valid, raises InvalidConfiguration otherwise
    """
    check_time_window(config.start, config.end, config.timestep)
    check_mass_budget(config.start_mass, config.end_mass)
    check_engine(config.thrust, config.isp)
    check_aerodynamics(config.cd, config.area)
    check_phases(config.phases)
    return True
