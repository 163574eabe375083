"""Worked answers to the suspended-block buoyancy problem."""

from .solve import solve_problem

__all__ = ["solve_problem"]
