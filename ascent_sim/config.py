"""
Ascent Kernel - Vehicle Configuration

This module provides the VehicleConfig dataclass passed to every driver,
plus factory functions for the preset flight plans.

A configuration is constructed once per run and never mutated; build
variants with dataclasses.replace().
"""

from dataclasses import dataclass
from typing import Tuple

from . import constants as C
from .phases import Phase, ascent, circularization, gravity_turn, max_q


@dataclass(frozen=True)
class VehicleConfig:
    """
    Immutable configuration of a single simulation run.

    Attributes:
        start_mass: Initial (wet) mass (kg)
        end_mass: Final (dry) mass; propellant is exhausted here (kg)
        thrust: Nominal thrust magnitude (N)
        isp: Specific impulse (s)
        cd: Drag coefficient
        area: Aerodynamic reference area (m^2)
        start: Simulation start time (s)
        end: Simulation end time (s)
        timestep: Sampling interval of the graph-mode record (s)
        phases: Ordered flight plan
    """

    # ── Mass budget ──────────────────────────────────────────────────────
    start_mass: float
    end_mass: float

    # ── Propulsion ───────────────────────────────────────────────────────
    thrust: float
    isp: float

    # ── Aerodynamics ─────────────────────────────────────────────────────
    cd: float
    area: float

    # ── Timing ───────────────────────────────────────────────────────────
    start: float = 0.0
    end: float = C.DEFAULT_END_TIME
    timestep: float = C.DEFAULT_TIMESTEP

    # ── Flight plan ──────────────────────────────────────────────────────
    phases: Tuple[Phase, ...] = ()

    @property
    def propellant_mass(self) -> float:
        """Usable propellant (kg)."""
        return self.start_mass - self.end_mass


def create_default_config() -> VehicleConfig:
    """
    Single-stage-to-orbit demonstration vehicle.

    Falcon 9 class mass and thrust with an inflated Isp so one stage can
    circularise; burns until 8:10, throttles through max-Q and fires a
    short circularization burn at 34:55.
    """
    return VehicleConfig(
        start_mass=C.F9_START_MASS,
        end_mass=C.F9_END_MASS,
        thrust=C.F9_THRUST,
        isp=C.F9_ORBIT_ISP,
        cd=C.F9_CD,
        area=C.F9_AREA,
        start=0.0,
        end=C.ORBIT_END_TIME,
        timestep=1.0,
        phases=(
            ascent(0.0, C.ORBIT_ASCENT_END, 1.0),
            gravity_turn(C.ORBIT_GRAVITY_TURN_START, C.GRAVITY_TURN_VECTOR),
            max_q(C.MAX_Q_START, C.MAX_Q_END, C.MAX_Q_THROTTLE),
            circularization(C.CIRCULARIZATION_START, C.CIRCULARIZATION_END,
                            C.CIRCULARIZATION_THROTTLE),
        ),
    )


def create_falcon9_config() -> VehicleConfig:
    """Realistic Falcon 9 class first stage (sub-orbital)."""
    return VehicleConfig(
        start_mass=C.F9_START_MASS,
        end_mass=C.F9_END_MASS,
        thrust=C.F9_THRUST,
        isp=C.F9_ISP,
        cd=C.F9_CD,
        area=C.F9_AREA,
        start=0.0,
        end=C.F9_END_TIME,
        timestep=1.0,
        phases=(
            gravity_turn(C.F9_GRAVITY_TURN_START, C.GRAVITY_TURN_VECTOR),
            max_q(C.MAX_Q_START, C.MAX_Q_END, C.MAX_Q_THROTTLE),
        ),
    )


PRESETS = {
    "orbit": create_default_config,
    "falcon9": create_falcon9_config,
}


def create_test_config(end: float = 20.0, **overrides) -> VehicleConfig:
    """Create a short run with no flight plan, suitable for testing.

    Any keyword arg accepted by VehicleConfig can be passed as an override.
    """
    defaults = dict(
        start_mass=C.F9_START_MASS,
        end_mass=C.F9_END_MASS,
        thrust=C.F9_THRUST,
        isp=C.F9_ORBIT_ISP,
        cd=C.F9_CD,
        area=C.F9_AREA,
        end=end,
    )
    defaults.update(overrides)
    return VehicleConfig(**defaults)
