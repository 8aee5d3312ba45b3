"""bb-optimizer: tableau simplex with an integer branch-and-bound search."""

from .errors import InvalidInput, NonConvergent, OptimizerError, OutOfSearchBounds, Unbounded
from .lp import SimplexSolver, parse_problem_text, simplex_solve
from .mip import IntegerSearch, SearchBounds, solve_mip_branch_and_bound
from .schemas import LPProblem, SearchOptions, SolveOptions

__all__ = [
    "InvalidInput",
    "IntegerSearch",
    "LPProblem",
    "NonConvergent",
    "OptimizerError",
    "OutOfSearchBounds",
    "SearchBounds",
    "SearchOptions",
    "SimplexSolver",
    "SolveOptions",
    "Unbounded",
    "parse_problem_text",
    "simplex_solve",
    "solve_mip_branch_and_bound",
]
