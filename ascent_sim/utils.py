"""
Ascent Kernel - Utility Functions

Vector helpers shared by the force models, the integrators and the
orbit tools.
"""

import numpy as np


def unit_vector(vec: np.ndarray) -> np.ndarray:
    """
    Direction of vec, or the zero vector if vec has zero length.
    """
    vec = np.asarray(vec, dtype=np.float64)
    norm = np.linalg.norm(vec)
    if norm == 0.0:
        return np.zeros_like(vec)
    return vec / norm


def set_length(vec: np.ndarray, length: float) -> np.ndarray:
    """
    Return a copy of vec rescaled to the given length.

    A zero vector stays zero whatever the requested length, so a vehicle
    at rest has no defined thrust or drag direction.
    """
    return unit_vector(vec) * length


def magnitudes(vectors) -> np.ndarray:
    """Euclidean norms of a sequence of vectors."""
    return np.linalg.norm(np.asarray(vectors, dtype=np.float64), axis=-1)
