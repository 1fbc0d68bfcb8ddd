"""
Ascent Kernel - Orbital Elements

Apsis and shape queries over a sampled orbit, plus an incremental apsis
detector for streamed flights.

Position sequences are ordered by distance from the planet centre,
farthest first: the apoapsis is the first entry and the periapsis the
last. Callers that already hold a sorted sequence pass is_sorted=True to
skip the sort; the caller's sequence is never reordered.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from . import constants as C

logger = logging.getLogger(__name__)


def _radius(position) -> float:
    return float(np.linalg.norm(position))


def sort_by_radius(positions: Sequence[np.ndarray]) -> List[np.ndarray]:
    """Stable copy of positions sorted by radius, farthest first."""
    return sorted(positions, key=_radius, reverse=True)


def _ordered(positions: Sequence[np.ndarray], is_sorted: bool) -> Sequence[np.ndarray]:
    if len(positions) == 0:
        raise ValueError("Orbital elements need at least one position")
    return positions if is_sorted else sort_by_radius(positions)


def get_positions(history) -> List[np.ndarray]:
    """Positions of an orbit history of (position, velocity) pairs."""
    return [r for r, _ in history]


def get_apoapsis(positions: Sequence[np.ndarray], is_sorted: bool = False) -> np.ndarray:
    """Farthest position of the orbit."""
    return np.asarray(_ordered(positions, is_sorted)[0], dtype=np.float64)


def get_periapsis(positions: Sequence[np.ndarray], is_sorted: bool = False) -> np.ndarray:
    """Closest position of the orbit."""
    return np.asarray(_ordered(positions, is_sorted)[-1], dtype=np.float64)


def get_semi_major_axis(positions: Sequence[np.ndarray], is_sorted: bool = False) -> float:
    """a = (|r_apo| + |r_peri|) / 2  (m)"""
    ordered = _ordered(positions, is_sorted)
    return (_radius(ordered[0]) + _radius(ordered[-1])) / 2


def get_orbital_period(positions: Sequence[np.ndarray], mu: float = C.MU_EARTH,
                       is_sorted: bool = False) -> float:
    """
    Orbital period from Kepler's third law.

    T = 2 * pi * sqrt(a^3 / mu)

    Returns:
        Period (s)
    """
    a = get_semi_major_axis(positions, is_sorted)
    return 2 * np.pi * np.sqrt(a ** 3 / mu)


def get_eccentricity(positions: Sequence[np.ndarray], is_sorted: bool = False) -> float:
    """e = (|r_apo| - |r_peri|) / (|r_apo| + |r_peri|)"""
    ordered = _ordered(positions, is_sorted)
    apo = _radius(ordered[0])
    peri = _radius(ordered[-1])
    return (apo - peri) / (apo + peri)


@dataclass(frozen=True)
class OrbitalElements:
    """
    Shape of a sampled orbit.

    Attributes:
        apoapsis: Farthest position (m)
        periapsis: Closest position (m)
        semi_major_axis: a (m)
        eccentricity: e
        period: T (s)
    """
    apoapsis: np.ndarray
    periapsis: np.ndarray
    semi_major_axis: float
    eccentricity: float
    period: float

    @property
    def apoapsis_altitude(self) -> float:
        return _radius(self.apoapsis) - C.R_EARTH

    @property
    def periapsis_altitude(self) -> float:
        return _radius(self.periapsis) - C.R_EARTH

    def __str__(self) -> str:
        return (
            f"OrbitalElements(apo={self.apoapsis_altitude/1000:.2f}km, "
            f"peri={self.periapsis_altitude/1000:.2f}km, "
            f"a={self.semi_major_axis/1000:.2f}km, "
            f"e={self.eccentricity:.5f}, "
            f"T={self.period/60:.2f}min)"
        )


def compute_orbital_elements(history, mu: float = C.MU_EARTH) -> OrbitalElements:
    """
    All orbital elements of an orbit history, sorting its positions once.

    Args:
        history: List of (position, velocity) pairs
        mu: Gravitational parameter (m^3/s^2)
    """
    ordered = _ordered(get_positions(history), is_sorted=False)
    return OrbitalElements(
        apoapsis=get_apoapsis(ordered, is_sorted=True),
        periapsis=get_periapsis(ordered, is_sorted=True),
        semi_major_axis=get_semi_major_axis(ordered, is_sorted=True),
        eccentricity=get_eccentricity(ordered, is_sorted=True),
        period=get_orbital_period(ordered, mu, is_sorted=True),
    )


# =============================================================================
# INCREMENTAL APSIS DETECTION
# =============================================================================

class ApsisKind(Enum):
    APOAPSIS = "apoapsis"
    PERIAPSIS = "periapsis"


@dataclass(frozen=True)
class ApsisEvent:
    """An apsis confirmed by the radius turning back."""
    kind: ApsisKind
    position: np.ndarray
    altitude: float


class ApsisTracker:
    """
    Detect apsides over a stream of positions.

    The farthest position seen so far is the apoapsis candidate; it is
    confirmed the first time the radius drops below it. Climbing past a
    confirmed apoapsis reopens the search. The periapsis search starts on
    the first confirmed apoapsis and then runs on every update, reopened
    apoapsis or not: the closest position so far is the candidate,
    confirmed when the radius rises above it.
    """

    def __init__(self):
        self.apoapsis: Optional[np.ndarray] = None
        self.periapsis: Optional[np.ndarray] = None
        self.apoapsis_confirmed = False
        self.periapsis_confirmed = False

    def update(self, position) -> Optional[ApsisEvent]:
        """
        Feed the next position.

        Returns:
            ApsisEvent when an apsis is confirmed by this position, else None
        """
        position = np.array(position, dtype=np.float64)
        radius = _radius(position)
        event = None

        if self.apoapsis is None or radius >= _radius(self.apoapsis):
            self.apoapsis = position
            self.apoapsis_confirmed = False
        elif not self.apoapsis_confirmed:
            self.apoapsis_confirmed = True
            event = self._event(ApsisKind.APOAPSIS, self.apoapsis)

        if self.apoapsis_confirmed or self.periapsis is not None:
            if self.periapsis is None or radius < _radius(self.periapsis):
                self.periapsis = position
                self.periapsis_confirmed = False
            elif radius > _radius(self.periapsis) and not self.periapsis_confirmed:
                self.periapsis_confirmed = True
                event = self._event(ApsisKind.PERIAPSIS, self.periapsis)

        return event

    @staticmethod
    def _event(kind: ApsisKind, position: np.ndarray) -> ApsisEvent:
        altitude = _radius(position) - C.R_EARTH
        logger.info(f"Reached {kind.value} of {altitude / 1000:.2f}km")
        return ApsisEvent(kind, position, altitude)
