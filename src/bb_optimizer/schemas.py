from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Status = Literal["optimal", "invalid", "infeasible", "unbounded", "iteration_limit"]


class LPProblem(BaseModel):
    """Dense ``max c^T x, Ax <= b, x >= 0`` problem; each constraint row ends with its bound."""

    name: str = "problem"
    constraints: List[List[float]]
    objective: List[float]


class SolveOptions(BaseModel):
    max_iters: int = Field(default=10_000, ge=1)
    tol: float = Field(default=1e-9, ge=0.0)
    integrality_tol: float = Field(default=1e-6, ge=0.0)


class SearchOptions(BaseModel):
    var_cap: int = Field(default=100, ge=0)
    num_vars: int = Field(default=2, ge=1)
    num_rows: Optional[int] = Field(default=2, ge=1)
    legacy_bound_check: bool = False


class LPSolution(BaseModel):
    status: Status
    objective_value: Optional[float]
    row_values: List[float] | None
    x: List[float] | None
    is_integral: bool = False
    iterations: int
    message: str = ""


class SearchResult(BaseModel):
    objective_value: float
    point: List[int]
    nodes_explored: int


class MIPSolution(BaseModel):
    status: Status
    objective_value: Optional[float]
    x: List[float] | None
    optimization_needed: bool = False
    lp: LPSolution | None = None
    search: SearchResult | None = None
    message: str = ""
