# State engine for the suspended-block buoyancy problem
#
# This library provides:
# - Physical constants, validation and JSON loading
# - Derived calibration values (computed once per constant set)
# - The three-phase state model mapping added water mass to sensor force
#
# All functions are pure; callers drive sampling (curves, playback).

from .constants import (
    PhysicalConstants,
    REFERENCE_CONSTANTS,
    validate_constants,
    constants_from_dict,
    load_constants,
)

from .derived import (
    BLOCK_AREA_FRACTION,
    KeyPoints,
    DerivedValues,
    compute_derived_values,
)

from .state import (
    Phase,
    SimulationState,
    classify_phase,
    compute_state,
    rod_load,
)

__all__ = [
    # Constants
    'PhysicalConstants',
    'REFERENCE_CONSTANTS',
    'validate_constants',
    'constants_from_dict',
    'load_constants',
    # Derived values
    'BLOCK_AREA_FRACTION',
    'KeyPoints',
    'DerivedValues',
    'compute_derived_values',
    # State
    'Phase',
    'SimulationState',
    'classify_phase',
    'compute_state',
    'rod_load',
]
