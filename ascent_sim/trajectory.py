"""
Ascent Kernel - Batch Drivers

This module runs whole trajectories in one call:
- Graph mode: vertical 2D ascent sampled into per-channel chart series
- 3D mode: list of per-step flight samples

Both drivers validate the configuration before the first step and are
pure functions of it.
"""

import logging
import time
from typing import List

import numpy as np

from . import constants as C
from .forces import compute_dynamic_pressure
from .integrators import step_trajectory, step_vertical
from .mass import is_propellant_exhausted
from .state import create_launch_state, create_vertical_launch_state
from .types import (
    CHANNELS, DataPoint, FlightSample, ImpactEvent, TrajectoryMeta, TrajectoryRecord,
)
from .validation import check_config

logger = logging.getLogger(__name__)


def _should_record(t: float, y: float, config) -> bool:
    """Sampling rule of the graph-mode record."""
    return t > config.start and (t % config.timestep == 0 or y <= C.R_EARTH)


def calculate_trajectory(config) -> TrajectoryRecord:
    """
    Run the graph-mode (vertical 2D) ascent.

    The vehicle starts at rest on the surface and is integrated at unit
    steps for t = 0 .. end inclusive. Recorded steps are split into the
    thrust and coast sections; the first recorded ground contact with the
    engine off is an impact and ends the run.

    Args:
        config: VehicleConfig

    Returns:
        TrajectoryRecord with one point per channel per recorded step

    Raises:
        InvalidConfiguration: if the configuration is not valid
    """
    check_config(config)

    series = {name: [] for name in CHANNELS}
    thrust_section = []
    coast_section = []
    impact = None
    depleted = False

    logger.info(f"Starting graph-mode run: end={config.end}s, "
                f"start={config.start}s, timestep={config.timestep}s")
    start_wall = time.time()

    state = create_vertical_launch_state(config)
    steps = 0

    while state.t <= config.end:
        t = state.t
        state, step = step_vertical(state, config)
        steps += 1

        if not depleted and is_propellant_exhausted(state.m, config.end_mass):
            depleted = True
            logger.info(f"Propellant exhausted at t={t:.0f}s")

        y = state.r[1]
        if not _should_record(t, y, config):
            continue

        if y < C.R_EARTH:
            state.r[1] = C.R_EARTH
            y = C.R_EARTH

        speed = float(np.linalg.norm(state.v))
        altitude = y - C.R_EARTH

        series['altitude'].append(DataPoint(t, altitude))
        series['velocity'].append(DataPoint(t, float(state.v[1])))
        series['acceleration'].append(DataPoint(t, step.acceleration))
        series['gravity'].append(DataPoint(t, step.gravity))
        series['twr'].append(DataPoint(t, step.twr))
        series['mass'].append(DataPoint(t, state.m))
        series['dynamic_pressure'].append(
            DataPoint(t, compute_dynamic_pressure(speed, altitude)))
        series['thrust'].append(DataPoint(t, step.thrust))

        if step.thrust > 0:
            thrust_section.append(t)
        else:
            coast_section.append(t)

        if y <= C.R_EARTH and step.thrust <= 0:
            impact = ImpactEvent(t, speed)
            logger.info(f"Ground impact at t={t:.0f}s, v={speed:.1f}m/s")
            break

    elapsed = time.time() - start_wall
    logger.info(f"Graph-mode run complete: {steps} steps, "
                f"{len(thrust_section) + len(coast_section)} samples in {elapsed:.2f}s")

    meta = TrajectoryMeta(
        thrust_section=tuple(thrust_section),
        coast_section=tuple(coast_section),
        impact=impact,
    )
    return TrajectoryRecord(
        meta=meta,
        **{name: tuple(points) for name, points in series.items()},
    )


def calculate_trajectory_3d(config) -> List[FlightSample]:
    """
    Run the 3D ascent for t = start, start + 1, ... while t < end.

    Stops early, returning the samples so far, if a step leaves the
    vehicle below the surface.

    Raises:
        InvalidConfiguration: if the configuration is not valid
    """
    check_config(config)

    logger.info(f"Starting 3D run: start={config.start}s, end={config.end}s")
    start_wall = time.time()

    state = create_launch_state(config)
    samples = []
    depleted = False

    while state.t < config.end:
        state, sample = step_trajectory(state, config)
        samples.append(sample)

        if not depleted and is_propellant_exhausted(state.m, config.end_mass):
            depleted = True
            logger.info(f"Propellant exhausted at t={sample.time:.0f}s")

        if state.radius < C.R_EARTH:
            logger.info(f"Run terminated below the surface at t={sample.time:.0f}s")
            break

    elapsed = time.time() - start_wall
    logger.info(f"3D run complete: {len(samples)} steps in {elapsed:.2f}s")
    logger.debug(f"Final state: {state}")
    return samples
