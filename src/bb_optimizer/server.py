from typing import List

from mcp.server.fastmcp import FastMCP

from .schemas import LPProblem, SearchOptions, SolveOptions
from .lp.simplex import simplex_solve
from .lp.parser import parse_problem_text
from .lp.utils import is_integral
from .mip.branch_and_bound import solve_mip_branch_and_bound

mcp = FastMCP("BB Optimizer")


@mcp.tool()
def solve_lp(problem: LPProblem, options: SolveOptions | None = None) -> dict:
    "Solve max c^T x, Ax <= b, x >= 0 via tableau simplex and return solution dict."
    opts = options or SolveOptions()
    return simplex_solve(problem, opts).model_dump()


@mcp.tool()
def solve_mip(
    problem: LPProblem,
    options: SolveOptions | None = None,
    search_options: SearchOptions | None = None,
) -> dict:
    "Solve the LP, then search integer points if the simplex optimum is fractional."
    return solve_mip_branch_and_bound(problem, options, search_options).model_dump()


@mcp.tool()
def parse_problem(spec: str) -> dict:
    "Parse 'maximize ... subject to ... <= ...' text into a structured LPProblem JSON."
    return parse_problem_text(spec).model_dump()


@mcp.tool()
def check_integrality(values: List[float], tol: float = 1e-6) -> dict:
    "Report whether every value is within tol of an integer."
    return {"is_integral": is_integral(values, tol)}


if __name__ == "__main__":
    mcp.run()
