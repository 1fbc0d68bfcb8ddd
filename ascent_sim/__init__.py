"""
Ascent Kernel Package

A unit-step rocket ascent simulator with a two-body orbit propagator.

Modules:
    - constants: Planet, atmosphere and preset vehicle parameters
    - config: Vehicle configuration and presets
    - phases: Flight phases and thrust scheduling
    - forces: Atmosphere, gravity, drag and mass flow models
    - mass: Propellant bookkeeping
    - state: Kinematic state dataclass
    - types: Flight samples and trajectory records
    - integrators: Ascent steps and RK4
    - trajectory: Batch drivers (graph mode, 3D)
    - streaming: Real-time streaming driver
    - orbit: Two-body orbit propagation
    - orbital_elements: Apsides, eccentricity, period
    - validation: Configuration checks
    - plotting: Chart and orbit rendering
"""

from .config import (
    VehicleConfig, create_default_config, create_falcon9_config, create_test_config,
)
from .orbit import propagate_orbit
from .orbital_elements import ApsisTracker, OrbitalElements, compute_orbital_elements
from .state import State
from .streaming import StreamingTrajectory
from .trajectory import calculate_trajectory, calculate_trajectory_3d
from .types import FlightSample, TrajectoryRecord
from .validation import InvalidConfiguration

__version__ = "1.0.0"

__all__ = [
    'VehicleConfig',
    'create_default_config',
    'create_falcon9_config',
    'create_test_config',
    'propagate_orbit',
    'ApsisTracker',
    'OrbitalElements',
    'compute_orbital_elements',
    'State',
    'StreamingTrajectory',
    'calculate_trajectory',
    'calculate_trajectory_3d',
    'FlightSample',
    'TrajectoryRecord',
    'InvalidConfiguration',
]
