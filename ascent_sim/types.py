"""
Ascent Kernel - Type Definitions

Structured values emitted by the kernel:
- FlightSample: per-step snapshot of the 3D / streaming path
- TrajectoryRecord: per-channel series of the graph-mode batch run
"""

from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from . import constants as C


def _readonly(vec) -> NDArray[np.float64]:
    arr = np.array(vec, dtype=np.float64)
    arr.setflags(write=False)
    return arr


class FlightSample(NamedTuple):
    """Snapshot of one 3D integration step. Arrays are read-only."""
    time: float  # Step time (s)
    position: NDArray[np.float64]  # Position after the step (m)
    velocity: NDArray[np.float64]  # Velocity after the step (m/s)
    gravity: NDArray[np.float64]  # Gravitational acceleration (m/s^2)
    drag: NDArray[np.float64]  # Drag force (N)
    thrust: NDArray[np.float64]  # Applied thrust (N)
    mass: float  # Mass after the step (kg)

    @classmethod
    def create(cls, time, position, velocity, gravity, drag, thrust, mass) -> 'FlightSample':
        return cls(
            time=float(time),
            position=_readonly(position),
            velocity=_readonly(velocity),
            gravity=_readonly(gravity),
            drag=_readonly(drag),
            thrust=_readonly(thrust),
            mass=float(mass),
        )

    @property
    def altitude(self) -> float:
        return float(np.linalg.norm(self.position)) - C.R_EARTH

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.velocity))

    @property
    def thrust_magnitude(self) -> float:
        return float(np.linalg.norm(self.thrust))


class VerticalStep(NamedTuple):
    """Scalar quantities computed by one graph-mode step."""
    acceleration: float  # Net vertical acceleration (m/s^2)
    gravity: float  # Local gravity (m/s^2)
    thrust: float  # Applied thrust (N)
    twr: float  # Thrust-to-weight ratio


class DataPoint(NamedTuple):
    """One point of a chart series."""
    time: float
    value: float


class ImpactEvent(NamedTuple):
    """Ground impact with the engine off."""
    time: float  # s
    velocity: float  # Impact speed (m/s)


# Channel name -> axis label with units
CHANNEL_LABELS: Dict[str, str] = {
    'altitude': 'Altitude (m)',
    'velocity': 'Velocity (m/s)',
    'acceleration': 'Acceleration (m/s²)',
    'gravity': 'Gravity (m/s²)',
    'twr': 'TWR',
    'mass': 'Mass (kg)',
    'dynamic_pressure': 'DynamicPressure (Pa)',
    'thrust': 'Thrust (N)',
}

CHANNELS = tuple(CHANNEL_LABELS)


@dataclass(frozen=True)
class TrajectoryMeta:
    """Summary of a graph-mode run. All fields are always present."""
    thrust_section: Tuple[float, ...] = ()
    coast_section: Tuple[float, ...] = ()
    impact: Optional[ImpactEvent] = None


@dataclass(frozen=True)
class TrajectoryRecord:
    """Per-channel series of a graph-mode run."""
    altitude: Tuple[DataPoint, ...] = ()
    velocity: Tuple[DataPoint, ...] = ()
    acceleration: Tuple[DataPoint, ...] = ()
    gravity: Tuple[DataPoint, ...] = ()
    twr: Tuple[DataPoint, ...] = ()
    mass: Tuple[DataPoint, ...] = ()
    dynamic_pressure: Tuple[DataPoint, ...] = ()
    thrust: Tuple[DataPoint, ...] = ()
    meta: TrajectoryMeta = field(default_factory=TrajectoryMeta)

    def channels(self) -> Dict[str, Tuple[DataPoint, ...]]:
        """Channel name -> series, in label order."""
        return {name: getattr(self, name) for name in CHANNELS}

    def thrusting(self, channel: str) -> Tuple[DataPoint, ...]:
        """Points of a channel sampled while the engine was producing thrust."""
        times = set(self.meta.thrust_section)
        return tuple(p for p in getattr(self, channel) if p.time in times)

    def times(self) -> Tuple[float, ...]:
        return tuple(p.time for p in self.altitude)

    def __len__(self) -> int:
        return len(self.altitude)
