"""Pytest fixtures for the submerge test suite."""

import pytest

from submerge.physics import PhysicalConstants, REFERENCE_CONSTANTS, compute_derived_values


@pytest.fixture
def constants():
    return REFERENCE_CONSTANTS


@pytest.fixture
def derived(constants):
    return compute_derived_values(constants)


@pytest.fixture
def unit_constants():
    """Constants whose derived values are exact in binary floating point."""
    return PhysicalConstants(
        block_weight=1.0,
        container_area=1.0,
        water_density=1.0,
        gravity=1.0,
        water_mass_touch=1.0,
        max_sensor_force=1.0,
    )
