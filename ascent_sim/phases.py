"""
Ascent Kernel - Flight Phases and Thrust Scheduling

A flight plan is an ordered collection of named phases:
- ascent / max_q / circularization: time windows scaling nominal thrust
- gravity_turn: a one-shot velocity impulse at an exact step

Window phases are evaluated in a fixed priority order (max-Q, ascent,
circularization, then the default); the first match wins and ratios are
never summed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np


class PhaseKind(Enum):
    """Phase tags. Values are the names used in flight plans."""
    ASCENT = "ascent"
    MAX_Q = "max_q"
    CIRCULARIZATION = "circularization"
    GRAVITY_TURN = "gravity_turn"


# Priority order for overlapping windows
WINDOW_PRIORITY = (PhaseKind.MAX_Q, PhaseKind.ASCENT, PhaseKind.CIRCULARIZATION)


@dataclass(frozen=True)
class WindowPhase:
    """
    Throttle window active while start <= t <= end.

    Attributes:
        kind: ASCENT, MAX_Q or CIRCULARIZATION
        start: Window opening time (s)
        end: Window closing time (s)
        thrust_ratio: Fraction of nominal thrust applied (0.0 to 1.0)
    """
    kind: PhaseKind
    start: float
    end: float
    thrust_ratio: float

    @property
    def name(self) -> str:
        return self.kind.value

    def is_active(self, t: float) -> bool:
        """Inclusive window test (3D path)."""
        return self.start <= t <= self.end

    def is_active_strict(self, t: float) -> bool:
        """Exclusive window test (graph-mode path)."""
        return self.start < t < self.end


@dataclass(frozen=True)
class GravityTurn:
    """
    Instantaneous velocity increment applied once, at t == start.

    Attributes:
        start: Step time at which the impulse fires (s)
        vector: Velocity increment (m/s)
    """
    start: float
    vector: Tuple[float, float, float]
    kind: PhaseKind = PhaseKind.GRAVITY_TURN

    @property
    def name(self) -> str:
        return self.kind.value

    def fires_at(self, t: float) -> bool:
        return t == self.start


Phase = Union[WindowPhase, GravityTurn]


def ascent(start: float, end: float, thrust_ratio: float = 1.0) -> WindowPhase:
    return WindowPhase(PhaseKind.ASCENT, start, end, thrust_ratio)


def max_q(start: float, end: float, thrust_ratio: float) -> WindowPhase:
    return WindowPhase(PhaseKind.MAX_Q, start, end, thrust_ratio)


def circularization(start: float, end: float, thrust_ratio: float) -> WindowPhase:
    return WindowPhase(PhaseKind.CIRCULARIZATION, start, end, thrust_ratio)


def gravity_turn(start: float, vector: Sequence[float]) -> GravityTurn:
    return GravityTurn(start, tuple(float(x) for x in vector))


def find_phase(phases: Iterable[Phase], kind: PhaseKind) -> Optional[Phase]:
    """Return the configured phase of the given kind, or None."""
    for phase in phases:
        if phase.kind is kind:
            return phase
    return None


def has_window_phases(phases: Iterable[Phase]) -> bool:
    return any(isinstance(phase, WindowPhase) for phase in phases)


def thrust_ratio_3d(phases: Sequence[Phase], t: float) -> float:
    """
    Effective thrust ratio for the 3D / streaming path.

    With no window phase configured the vehicle burns at full thrust.
    Otherwise the first active window in priority order sets the ratio,
    and outside every window the vehicle coasts.

    Args:
        phases: Configured flight plan
        t: Step time (s)

    Returns:
        Thrust ratio in [0, 1]
    """
    if not has_window_phases(phases):
        return 1.0

    for kind in WINDOW_PRIORITY:
        phase = find_phase(phases, kind)
        if phase is not None and phase.is_active(t):
            return phase.thrust_ratio

    return 0.0


def thrust_ratio_2d(phases: Sequence[Phase], t: float) -> float:
    """
    Effective thrust ratio for the graph-mode (vertical 2D) path.

    Full nominal thrust unless a max-Q window strictly contains t.
    Ascent and circularization windows are not consulted on this path;
    see DESIGN.md for the divergence from thrust_ratio_3d.
    """
    phase = find_phase(phases, PhaseKind.MAX_Q)
    if phase is not None and phase.is_active_strict(t):
        return phase.thrust_ratio
    return 1.0


def gravity_turn_impulse(phases: Sequence[Phase], t: float) -> Optional[np.ndarray]:
    """Velocity impulse to add at step time t, or None."""
    phase = find_phase(phases, PhaseKind.GRAVITY_TURN)
    if phase is not None and phase.fires_at(t):
        return np.array(phase.vector, dtype=np.float64)
    return None
