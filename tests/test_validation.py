import dataclasses

import pytest
import numpy as np
from ascent_sim import validation, phases
from ascent_sim.config import create_test_config
from ascent_sim.validation import InvalidConfiguration


def test_invalid_configuration_is_value_error():
    assert issubclass(InvalidConfiguration, ValueError)


# ============================================================================
# Time window
# ============================================================================

def test_check_time_window_valid():
    assert validation.check_time_window(0.0, 10.0, 1.0)

def test_check_time_window_end_before_start():
    with pytest.raises(InvalidConfiguration):
        validation.check_time_window(10.0, 10.0)
    with pytest.raises(InvalidConfiguration):
        validation.check_time_window(10.0, 5.0)

def test_check_time_window_bad_timestep():
    with pytest.raises(InvalidConfiguration):
        validation.check_time_window(0.0, 10.0, 0.0)


# ============================================================================
# Vehicle
# ============================================================================

def test_check_mass_budget():
    assert validation.check_mass_budget(2.0, 1.0)
    with pytest.raises(InvalidConfiguration):
        validation.check_mass_budget(1.0, 1.0)
    with pytest.raises(InvalidConfiguration):
        validation.check_mass_budget(1.0, 0.0)

def test_check_engine():
    assert validation.check_engine(0.0, 300.0)
    with pytest.raises(InvalidConfiguration):
        validation.check_engine(-1.0, 300.0)
    with pytest.raises(InvalidConfiguration):
        validation.check_engine(100.0, 0.0)

def test_check_aerodynamics():
    assert validation.check_aerodynamics(0.0, 0.0)
    with pytest.raises(InvalidConfiguration):
        validation.check_aerodynamics(-0.1, 1.0)


# ============================================================================
# Phases
# ============================================================================

def test_check_phases_valid():
    plan = (phases.ascent(0.0, 10.0), phases.max_q(5.0, 8.0, 0.9))
    assert validation.check_phases(plan)

def test_check_phases_allows_inverted_window():
    assert validation.check_phases((phases.max_q(50.0, 40.0, 0.5),))

def test_check_phases_ratio_out_of_range():
    with pytest.raises(InvalidConfiguration):
        validation.check_phases((phases.max_q(0.0, 10.0, 1.5),))
    with pytest.raises(InvalidConfiguration):
        validation.check_phases((phases.ascent(0.0, 10.0, -0.1),))

def test_check_phases_duplicate_kind():
    plan = (phases.ascent(0.0, 10.0), phases.ascent(20.0, 30.0))
    with pytest.raises(InvalidConfiguration):
        validation.check_phases(plan)


# ============================================================================
# Orbit inputs
# ============================================================================

def test_check_position_nonzero():
    assert validation.check_position_nonzero(np.array([1.0, 0.0, 0.0]))
    with pytest.raises(InvalidConfiguration):
        validation.check_position_nonzero(np.zeros(3))

def test_check_step_size():
    assert validation.check_step_size(0.0, 1.0)
    with pytest.raises(InvalidConfiguration):
        validation.check_step_size(100.0, 0.0)
    with pytest.raises(InvalidConfiguration):
        validation.check_step_size(-1.0, 1.0)


# ============================================================================
# check_config
# ============================================================================

def test_check_config_valid():
    assert validation.check_config(create_test_config())

def test_check_config_rejects_bad_field():
    cfg = dataclasses.replace(create_test_config(), end_mass=1e9)
    with pytest.raises(InvalidConfiguration):
        validation.check_config(cfg)
