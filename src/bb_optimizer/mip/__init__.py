"""Mixed-integer programming helpers for bb-optimizer."""

from .branch_and_bound import IntegerSearch, SearchBounds, solve_mip_branch_and_bound

__all__ = ["IntegerSearch", "SearchBounds", "solve_mip_branch_and_bound"]
