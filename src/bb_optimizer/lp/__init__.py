"""Linear programming utilities for bb-optimizer."""

from .simplex import SimplexSolver, simplex_solve
from .parser import parse_problem_text

__all__ = ["SimplexSolver", "simplex_solve", "parse_problem_text"]
