#!/usr/bin/env python3
"""
Physical state of the setup for a given mass of added water.

Three phases, selected by comparing the water volume against the volume
below the block and the ring around it:

1. BELOW:  water has not reached the block, level rises across the full
           container area, no buoyancy.
2. RISING: level rises through the annular gap around the block, the
           submerged height equals the rise above the block bottom.
3. ABOVE:  block fully submerged, level rises across the full area again.

A value exactly on a boundary belongs to the lower phase.

Every call is computed from scratch; nothing is carried between samples.
"""

import math
from dataclasses import dataclass
from enum import Enum

from submerge.errors import DomainError
from .constants import PhysicalConstants
from .derived import DerivedValues, compute_derived_values

# Relative tolerance on the full-submersion volume
BOUNDARY_REL_TOL = 1e-9


class Phase(Enum):
    BELOW = 'below'
    RISING = 'rising'
    ABOVE = 'above'


@dataclass(frozen=True)
class SimulationState:
    water_mass: float              # kg, echoed input
    water_height: float            # m, level in the container
    sensor_force: float            # N, magnitude read by the sensor
    buoyancy: float                # N
    block_submerged_height: float  # m
    phase: Phase

    def to_dict(self) -> dict:
        return {
            'water_mass_kg': self.water_mass,
            'water_height_m': self.water_height,
            'sensor_force_N': self.sensor_force,
            'buoyancy_N': self.buoyancy,
            'block_submerged_height_m': self.block_submerged_height,
            'phase': self.phase.value,
        }


def _check_mass(water_mass: float) -> None:
    if math.isnan(water_mass) or water_mass < 0:
        raise DomainError(f"Water mass must be >= 0 kg (got {water_mass})")


def _water_geometry(water_mass: float, constants: PhysicalConstants,
                    derived: DerivedValues) -> tuple:
    """Return (phase, water_height, block_submerged_height) for a water mass."""
    S = constants.container_area
    rho = constants.water_density
    block_height = derived.block_height
    annular_area = S - derived.block_cross_section

    v_water = water_mass / rho

    # Phase boundaries come straight from the key masses, the same way v_water
    # comes from the sample, so a key mass lands on its own boundary.
    v_below = derived.key_points.touch_kg / rho
    v_submerged = derived.key_points.submerged_kg / rho
    h_block_bottom = v_below / S

    if v_water <= v_below:
        return Phase.BELOW, v_water / S, 0.0

    v_remaining = v_water - v_below

    # submerged_kg carries rounding from the derivation; within it counts as the boundary
    if v_water <= v_submerged or math.isclose(v_water, v_submerged, rel_tol=BOUNDARY_REL_TOL):
        h_rise = min(v_remaining / annular_area, block_height)
        return Phase.RISING, h_block_bottom + h_rise, h_rise

    v_above = max(v_remaining - block_height * annular_area, 0.0)
    h_above = v_above / S
    return Phase.ABOVE, h_block_bottom + block_height + h_above, block_height


def classify_phase(water_mass: float, constants: PhysicalConstants,
                   derived: DerivedValues = None) -> Phase:
    """Phase of the model for a water mass (boundaries belong to the lower phase)."""
    _check_mass(water_mass)
    if derived is None:
        derived = compute_derived_values(constants)
    return _water_geometry(water_mass, constants, derived)[0]


def compute_state(water_mass: float, constants: PhysicalConstants,
                  derived: DerivedValues = None) -> SimulationState:
    """
    Compute the full physical state for one water-mass sample.

    Args:
        water_mass: Mass of water added (kg), must be >= 0. Not clamped.
        constants: Physical constants
        derived: Derived values for *constants* (default: cached computation)

    Returns:
        SimulationState

    Raises:
        DomainError: water_mass is negative or NaN
        ConfigurationError: constants are invalid (when derived is computed here)
    """
    _check_mass(water_mass)
    if derived is None:
        derived = compute_derived_values(constants)

    phase, water_height, submerged_height = _water_geometry(water_mass, constants, derived)

    # Buoyancy is linear in submerged height (constant block cross-section)
    fraction = min(max(submerged_height / derived.block_height, 0.0), 1.0)
    buoyancy = fraction * derived.max_buoyancy

    # The rod transmits |G - F_buoy|: tension before floating, compression after
    sensor_force = abs(constants.block_weight - buoyancy)

    return SimulationState(
        water_mass=water_mass,
        water_height=water_height,
        sensor_force=sensor_force,
        buoyancy=buoyancy,
        block_submerged_height=submerged_height,
        phase=phase,
    )


def rod_load(state: SimulationState, constants: PhysicalConstants,
             tolerance: float = 1e-9) -> str:
    """
    Direction of the load in the rod, which the sensor itself cannot tell apart.

    Returns:
        'tension' while weight exceeds buoyancy, 'compression' once buoyancy
        exceeds weight, 'none' when they balance within *tolerance* (N)
    """
    net = constants.block_weight - state.buoyancy
    if abs(net) <= tolerance:
        return 'none'
    return 'tension' if net > 0 else 'compression'
