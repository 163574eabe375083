#!/usr/bin/env python3
"""
Calibration quantities derived once from the physical constants.

Reading the sensor graph:
- Before the water touches the block the sensor shows the weight G.
- Once fully submerged the rod is in compression and the sensor shows
  F_buoy_max - G, so F_buoy_max = max_sensor_force + G.
- Archimedes at full submersion gives the block volume.

The block's real shape is not determined by the problem. For the water
level we assume a prism whose cross-section is BLOCK_AREA_FRACTION of the
container's. Buoyancy is then linear in submerged height, which is what
makes the float-equilibrium key point a linear interpolation.
"""

from dataclasses import dataclass
from functools import lru_cache

from submerge.errors import ConfigurationError
from .constants import PhysicalConstants, validate_constants

# Visualization convention, not physics: block area = half the container area.
# Changing the block geometry invalidates the linear buoyancy law in state.py.
BLOCK_AREA_FRACTION = 0.5


@dataclass(frozen=True)
class KeyPoints:
    """Water masses (kg) delimiting the three phases of the model."""

    touch_kg: float      # water surface reaches the block bottom
    float_kg: float      # buoyancy equals weight, sensor reads zero
    submerged_kg: float  # block fully under water

    def to_dict(self, ndigits: int = 2) -> dict:
        return {
            'touch_kg': round(self.touch_kg, ndigits),
            'float_kg': round(self.float_kg, ndigits),
            'submerged_kg': round(self.submerged_kg, ndigits),
        }


@dataclass(frozen=True)
class DerivedValues:
    block_mass: float           # kg
    max_buoyancy: float         # N
    block_volume: float         # m³
    block_density: float        # kg/m³
    block_cross_section: float  # m², assumed
    block_height: float         # m, follows from the assumed cross-section
    key_points: KeyPoints

    def to_dict(self) -> dict:
        return {
            'block_mass_kg': self.block_mass,
            'max_buoyancy_N': self.max_buoyancy,
            'block_volume_m3': self.block_volume,
            'block_density_kg_m3': self.block_density,
            'block_cross_section_m2': self.block_cross_section,
            'block_height_m': self.block_height,
            'key_points': self.key_points.to_dict(),
        }


@lru_cache(maxsize=32)
def compute_derived_values(constants: PhysicalConstants) -> DerivedValues:
    """
    Derive block properties and key water masses from the constants.

    Memoised per constant set, so per-sample callers do not repeat the work.

    Args:
        constants: Physical constants (validated here)

    Returns:
        DerivedValues

    Raises:
        ConfigurationError: constants violate the model's preconditions
    """
    validate_constants(constants)

    G = constants.block_weight
    S = constants.container_area
    rho = constants.water_density
    g = constants.gravity

    block_mass = G / g

    # Fully submerged: sensor = F_buoy_max - G
    max_buoyancy = constants.max_sensor_force + G

    block_volume = max_buoyancy / (rho * g)
    block_density = block_mass / block_volume

    block_cross_section = S * BLOCK_AREA_FRACTION
    if not 0 < block_cross_section < S:
        raise ConfigurationError(
            f"Block cross-section {block_cross_section} m² must lie strictly "
            f"between 0 and the container area {S} m²")
    block_height = block_volume / block_cross_section

    # Key masses
    m_touch = constants.water_mass_touch

    # Water filling the ring around the block up to its top
    annular_area = S - block_cross_section
    m_submerged = m_touch + annular_area * block_height * rho

    # Buoyancy grows linearly from 0 at touch to max at full submersion
    ratio = G / max_buoyancy
    m_float = m_touch + (m_submerged - m_touch) * ratio

    return DerivedValues(
        block_mass=block_mass,
        max_buoyancy=max_buoyancy,
        block_volume=block_volume,
        block_density=block_density,
        block_cross_section=block_cross_section,
        block_height=block_height,
        key_points=KeyPoints(
            touch_kg=m_touch,
            float_kg=m_float,
            submerged_kg=m_submerged,
        ),
    )
