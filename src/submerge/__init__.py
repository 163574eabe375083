"""Steady-state model of a submerging block hanging from a force sensor."""

from .errors import SubmergeError, ConfigurationError, DomainError
from .physics import (
    PhysicalConstants,
    REFERENCE_CONSTANTS,
    KeyPoints,
    DerivedValues,
    Phase,
    SimulationState,
    compute_derived_values,
    compute_state,
)

__all__ = [
    "SubmergeError",
    "ConfigurationError",
    "DomainError",
    "PhysicalConstants",
    "REFERENCE_CONSTANTS",
    "KeyPoints",
    "DerivedValues",
    "Phase",
    "SimulationState",
    "compute_derived_values",
    "compute_state",
]
