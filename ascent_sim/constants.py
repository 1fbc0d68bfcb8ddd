"""
Ascent Kernel - Physical Constants and Default Parameters

This module defines the planet model, the exponential atmosphere, the
streaming pacing constants and the preset vehicle parameters used
throughout the simulation.
"""

import numpy as np

# =============================================================================
# PLANET PARAMETERS
# =============================================================================

# Planet mean radius (m)
R_EARTH = 6371000.0

# Gravitational parameter (m^3/s^2), kept as the product of the mass and
# G factors the trajectory records were originally generated with
MU_EARTH = 597200000.0 * 667384.0

# =============================================================================
# ATMOSPHERE MODEL (exponential)
# =============================================================================

RHO_0 = 1.3  # Surface density (kg/m^3)
H_SCALE = 7000.0  # Scale height (m)

# =============================================================================
# INITIAL CONDITIONS
# =============================================================================

# Graph mode launches straight up the +y axis from rest
INITIAL_POSITION_2D = np.array([0.0, R_EARTH])
INITIAL_VELOCITY_2D = np.array([0.0, 0.0])

# 3D mode launches from the "north pole" with a 1 m/s upward seed velocity
# so the prograde thrust direction is defined on the first step
INITIAL_POSITION_3D = np.array([0.0, R_EARTH, 0.0])
INITIAL_VELOCITY_3D = np.array([0.0, 1.0, 0.0])

# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

# Integration step of the ascent kernel (s). Every driver advances in unit steps.
DT = 1.0

# Default end time when a configuration does not set one (s)
DEFAULT_END_TIME = 60.0

# Default sampling interval of the graph-mode record (s)
DEFAULT_TIMESTEP = 1.0

# Streaming driver: minimum wall-clock gap between two steps (ms)
STREAM_MIN_INTERVAL_MS = 10.0

# Frame period of the caller-side real-time loop (s)
FRAME_INTERVAL = 1.0 / 60.0

# =============================================================================
# ORBIT PROPAGATION DEFAULTS
# =============================================================================

ORBIT_TSPAN = 100.0 * 60.0  # s
ORBIT_DT = 100.0  # s

# Demo circular orbits (altitude in m, duration and step in s)
DEMO_ORBIT_ALTITUDE = 450000.0
DEMO_ORBIT_TSPAN = 95.0 * 60.0
DEMO_ORBIT_DT = 10.0

# =============================================================================
# PRESET VEHICLE (Falcon 9 class first stage)
# =============================================================================

F9_START_MASS = 549054.0  # kg
F9_END_MASS = 200000.0  # kg
F9_THRUST = 7607000.0  # N
F9_ISP = 290.0  # s (sea level class)
F9_ORBIT_ISP = 1200.0  # s (inflated so a single stage reaches orbit)
F9_CD = 0.3
F9_AREA = 10.7521  # m^2

# Phase timings of the orbital preset (s)
ORBIT_ASCENT_END = 8.0 * 60.0 + 10.0
ORBIT_GRAVITY_TURN_START = 23.0
MAX_Q_START = 30.0
MAX_Q_END = 65.0
MAX_Q_THROTTLE = 0.9
CIRCULARIZATION_START = 34.0 * 60.0 + 55.0
CIRCULARIZATION_END = 35.0 * 60.0 + 6.8
CIRCULARIZATION_THROTTLE = 0.5

# Gravity turn of the sub-orbital preset (s)
F9_GRAVITY_TURN_START = 11.0
GRAVITY_TURN_VECTOR = (1.0, 0.0, 0.0)  # m/s impulse

ORBIT_END_TIME = 10000.0
F9_END_TIME = 8000.0
