"""Custom exceptions for the :mod:`submerge` package."""
from __future__ import annotations


class SubmergeError(Exception):
    """Base exception for buoyancy sensor model errors."""


class ConfigurationError(SubmergeError, ValueError):
    """Physical constants violate the model's preconditions."""


class DomainError(SubmergeError, ValueError):
    """A sample lies outside the domain the model is defined on."""


__all__ = [
    "SubmergeError",
    "ConfigurationError",
    "DomainError",
]
