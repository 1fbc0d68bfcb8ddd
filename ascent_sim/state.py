"""
Ascent Kernel - Kinematic State

This module defines the single state dataclass advanced by the ascent
integrators. Each step returns a new State; the active driver owns it.
"""

from dataclasses import dataclass, field
import numpy as np

from . import constants as C


@dataclass
class State:
    """
    Kinematic state of the vehicle.

    Attributes:
        r: Position vector, planet-centred (m) [2] or [3]
        v: Velocity vector (m/s) [2] or [3]
        m: Total vehicle mass (kg)
        t: Simulation time (s)
    """

    # Position, planet-centred (m)
    r: np.ndarray = field(default_factory=lambda: C.INITIAL_POSITION_3D.copy())

    # Velocity (m/s)
    v: np.ndarray = field(default_factory=lambda: np.zeros(3))

    # Total mass (kg)
    m: float = 0.0

    # Simulation time (s)
    t: float = 0.0

    def __post_init__(self):
        """Ensure arrays are numpy arrays with correct dtype."""
        for attr in ['r', 'v']:
            setattr(self, attr, np.asarray(getattr(self, attr), dtype=np.float64))
        self.m = float(self.m)
        self.t = float(self.t)

    @property
    def radius(self) -> float:
        """Distance from the planet centre (m)."""
        return float(np.linalg.norm(self.r))

    @property
    def altitude(self) -> float:
        """Altitude above the surface (m)."""
        return self.radius - C.R_EARTH

    @property
    def speed(self) -> float:
        """Magnitude of velocity (m/s)."""
        return float(np.linalg.norm(self.v))

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"State(t={self.t:.2f}s, "
            f"alt={self.altitude/1000:.2f}km, "
            f"v={self.speed:.1f}m/s, "
            f"m={self.m:.1f}kg)"
        )


def create_launch_state(config) -> State:
    """
    Launch state of the 3D and streaming drivers.

    Returns:
        State on the surface at config.start with a unit upward velocity
    """
    return State(
        r=C.INITIAL_POSITION_3D.copy(),
        v=C.INITIAL_VELOCITY_3D.copy(),
        m=config.start_mass,
        t=config.start,
    )


def create_vertical_launch_state(config) -> State:
    """
    Launch state of the graph-mode driver: at rest on the surface, t = 0.

    Graph mode always integrates from t = 0; config.start only gates
    which steps are recorded.
    """
    return State(
        r=C.INITIAL_POSITION_2D.copy(),
        v=C.INITIAL_VELOCITY_2D.copy(),
        m=config.start_mass,
        t=0.0,
    )
