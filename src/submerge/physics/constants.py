#!/usr/bin/env python3
"""
Physical constants for the suspended-block buoyancy problem.

A block hangs from a force sensor on a rigid rod above a cylindrical
container. Six constants describe the setup; everything else the model
needs is derived from them once (see derived.py).

Constant files are JSON objects with unit-suffixed keys:

    {
      "block_weight_N": 5.0,
      "container_area_m2": 0.01,
      "water_density_kg_m3": 1000.0,
      "gravity_N_kg": 10.0,
      "water_mass_touch_kg": 1.0,
      "max_sensor_force_N": 7.0
    }

Keys missing from a file fall back to REFERENCE_CONSTANTS.
"""

import json
import math
from dataclasses import asdict, dataclass, fields

from submerge.errors import ConfigurationError


@dataclass(frozen=True)
class PhysicalConstants:
    """Fixed inputs of the model. Hashable, so derived values can be cached per set."""

    block_weight: float      # G (N), sensor reading before water touches the block
    container_area: float    # S (m²)
    water_density: float     # rho (kg/m³)
    gravity: float           # g (N/kg)
    water_mass_touch: float  # water mass at which the surface reaches the block (kg)
    max_sensor_force: float  # sensor reading once fully submerged (N)

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for key, attr in JSON_KEYS.items()}


# JSON key -> dataclass attribute
JSON_KEYS = {
    'block_weight_N': 'block_weight',
    'container_area_m2': 'container_area',
    'water_density_kg_m3': 'water_density',
    'gravity_N_kg': 'gravity',
    'water_mass_touch_kg': 'water_mass_touch',
    'max_sensor_force_N': 'max_sensor_force',
}

# Values read off the textbook problem's graph
REFERENCE_CONSTANTS = PhysicalConstants(
    block_weight=5.0,
    container_area=0.01,
    water_density=1000.0,
    gravity=10.0,
    water_mass_touch=1.0,
    max_sensor_force=7.0,
)


def validate_constants(constants: PhysicalConstants) -> None:
    """
    Check the preconditions of the model.

    Raises:
        ConfigurationError: listing every violated condition
    """
    problems = []
    non_finite = set()

    for f in fields(constants):
        value = getattr(constants, f.name)
        if not math.isfinite(value):
            non_finite.add(f.name)
            problems.append(f"{f.name} must be finite (got {value})")

    # Range checks only for finite values, so no field is reported twice
    for name in ('block_weight', 'container_area', 'water_density', 'gravity'):
        value = getattr(constants, name)
        if name not in non_finite and value <= 0:
            problems.append(f"{name} must be > 0 (got {value})")

    if 'water_mass_touch' not in non_finite and constants.water_mass_touch < 0:
        problems.append(f"water_mass_touch must be >= 0 (got {constants.water_mass_touch})")

    # Maximum buoyancy must be positive or the block has no volume
    max_buoyancy = constants.max_sensor_force + constants.block_weight
    if not non_finite & {'max_sensor_force', 'block_weight'} and max_buoyancy <= 0:
        problems.append(
            f"max_sensor_force + block_weight must be > 0 (got {max_buoyancy})")

    if problems:
        raise ConfigurationError("; ".join(problems))


def constants_from_dict(data: dict, base: PhysicalConstants = REFERENCE_CONSTANTS) -> PhysicalConstants:
    """
    Build constants from a JSON-style dict layered over *base*.

    Raises:
        ConfigurationError: on unknown keys or non-numeric values
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Constants must be a JSON object, got {type(data).__name__}")

    unknown = sorted(set(data) - set(JSON_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown constant keys: {', '.join(unknown)}")

    values = asdict(base)
    for key, value in data.items():
        # bool is an int subclass but never a physical quantity
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"{key} must be a number (got {value!r})")
        values[JSON_KEYS[key]] = float(value)

    return PhysicalConstants(**values)


def load_constants(path: str) -> PhysicalConstants:
    """Load a constants JSON file, falling back to the reference values for missing keys."""
    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    return constants_from_dict(data)
