import pytest
import numpy as np
from ascent_sim import utils

def test_unit_vector():
    u = utils.unit_vector(np.array([3.0, 4.0, 0.0]))
    np.testing.assert_allclose(u, [0.6, 0.8, 0.0])

def test_unit_vector_zero():
    u = utils.unit_vector(np.zeros(3))
    np.testing.assert_array_equal(u, np.zeros(3))

def test_set_length():
    v = utils.set_length(np.array([0.0, 2.0, 0.0]), 5.0)
    np.testing.assert_array_equal(v, [0.0, 5.0, 0.0])

def test_set_length_zero_vector_stays_zero():
    v = utils.set_length(np.zeros(2), 5.0)
    np.testing.assert_array_equal(v, np.zeros(2))

def test_set_length_returns_copy():
    vec = np.array([1.0, 0.0])
    out = utils.set_length(vec, 1.0)
    out[0] = 7.0
    assert vec[0] == 1.0

def test_magnitudes():
    m = utils.magnitudes([[3.0, 4.0, 0.0], [0.0, 0.0, 2.0]])
    np.testing.assert_allclose(m, [5.0, 2.0])
