import logging
from typing import List, NamedTuple, Optional, Sequence, Set, Tuple

from pydantic import BaseModel, ConfigDict

from ..errors import InvalidInput, OptimizerError, OutOfSearchBounds
from ..lp.simplex import SimplexSolver
from ..schemas import LPProblem, LPSolution, MIPSolution, SearchOptions, SearchResult, SolveOptions

logger = logging.getLogger(__name__)


class SearchBounds(BaseModel):
    """
    Immutable bound/objective data for the integer search:
    ``coefficients[i] . x <= bounds[i]`` for every row, maximise ``objective . x``.
    """

    model_config = ConfigDict(frozen=True)

    coefficients: Tuple[Tuple[float, ...], ...]
    bounds: Tuple[float, ...]
    objective: Tuple[float, ...]

    @property
    def num_vars(self) -> int:
        return len(self.objective)

    @classmethod
    def from_problem(
        cls,
        constraints: Sequence[Sequence[float]],
        objective: Sequence[float],
        num_vars: int = 2,
        num_rows: Optional[int] = 2,
        legacy_bound_check: bool = False,
    ) -> "SearchBounds":
        """
        Take the first ``num_vars`` coefficients of the first ``num_rows`` rows
        (all rows when ``None``) plus their bounds, and the matching objective
        coefficients.

        ``legacy_bound_check`` reproduces the historical check where every row after
        the first reuses the first row's coefficient for the second variable
        (``a10*x1 + a01*x3 <= b11`` instead of ``a11``).
        """

        if len(objective) < num_vars:
            raise InvalidInput(
                f"Integer search needs {num_vars} variables; objective has {len(objective)}."
            )
        rows = list(constraints if num_rows is None else constraints[:num_rows])
        if not rows:
            raise InvalidInput("Integer search needs at least one constraint row.")

        coefficients: List[Tuple[float, ...]] = []
        bounds: List[float] = []
        for idx, row in enumerate(rows):
            if len(row) < num_vars + 1:
                raise InvalidInput(
                    f"Constraint {idx + 1} has {len(row)} entries; need at least {num_vars + 1}."
                )
            coeffs = [float(value) for value in row[:num_vars]]
            if legacy_bound_check and idx > 0 and num_vars > 1:
                coeffs[1] = float(rows[0][1])
            coefficients.append(tuple(coeffs))
            bounds.append(float(row[-1]))

        return cls(
            coefficients=tuple(coefficients),
            bounds=tuple(bounds),
            objective=tuple(float(value) for value in objective[:num_vars]),
        )


class SearchNode(NamedTuple):
    point: Tuple[int, ...]
    value: float


class IntegerSearch:
    """
    Depth-first enumeration of the non-negative integer lattice from the origin.
    Each popped node branches into one unit increment per variable; a child is
    kept only if it stays under ``var_cap``, satisfies every bound row, and
    strictly beats the incumbent value.
    """

    def __init__(self, bounds: SearchBounds, var_cap: int = 100) -> None:
        self.bounds = bounds
        self.var_cap = var_cap

    def evaluate_objective(self, point: Sequence[int]) -> float:
        return sum(c * x for c, x in zip(self.bounds.objective, point))

    def within_bounds(self, point: Sequence[int]) -> bool:
        for coeffs, bound in zip(self.bounds.coefficients, self.bounds.bounds):
            if sum(a * x for a, x in zip(coeffs, point)) > bound:
                return False
        return True

    def search(self) -> SearchResult:
        seed = SearchNode(point=(0,) * self.bounds.num_vars, value=0.0)
        if not self.within_bounds(seed.point):
            raise OutOfSearchBounds(
                "No feasible integer point: the origin already violates the bounds."
            )

        best_value = seed.value
        best_point = seed.point
        stack: List[SearchNode] = [seed]
        expanded: Set[Tuple[int, ...]] = set()
        nodes_explored = 0

        while stack:
            current = stack.pop()
            nodes_explored += 1

            if current.value > best_value:
                best_value = current.value
                best_point = current.point
                logger.debug("incumbent %s -> %.6g", best_point, best_value)

            if current.point in expanded:
                continue
            expanded.add(current.point)

            # reversed so the first variable's branch is on top of the stack
            for j in reversed(range(self.bounds.num_vars)):
                if current.point[j] + 1 > self.var_cap:
                    continue
                child = current.point[:j] + (current.point[j] + 1,) + current.point[j + 1 :]
                if not self.within_bounds(child):
                    continue
                value = self.evaluate_objective(child)
                if value > best_value:
                    stack.append(SearchNode(point=child, value=value))

        logger.info(
            "integer search finished: %.6g at %s after %d nodes",
            best_value,
            best_point,
            nodes_explored,
        )
        return SearchResult(
            objective_value=best_value,
            point=list(best_point),
            nodes_explored=nodes_explored,
        )


def solve_mip_branch_and_bound(
    problem: LPProblem,
    opts: Optional[SolveOptions] = None,
    search_opts: Optional[SearchOptions] = None,
) -> MIPSolution:
    """
    Solve the LP relaxation with simplex; if the row values are already integral
    no search is needed, otherwise run the integer search over the first
    ``search_opts.num_vars`` variables. Failures come back as a status.
    """

    search_opts = search_opts or SearchOptions()
    solver = SimplexSolver(opts)

    try:
        row_values = solver.solve(problem.constraints, problem.objective)
        lp_solution = LPSolution(
            status="optimal",
            objective_value=solver.objective_value(),
            row_values=row_values,
            x=solver.variable_values(),
            is_integral=solver.is_integer_solution(row_values),
            iterations=solver.iterations,
        )

        if lp_solution.is_integral:
            return MIPSolution(
                status="optimal",
                objective_value=lp_solution.objective_value,
                x=lp_solution.x,
                optimization_needed=False,
                lp=lp_solution,
                message="No optimization needed",
            )

        bounds = SearchBounds.from_problem(
            problem.constraints,
            problem.objective,
            num_vars=search_opts.num_vars,
            num_rows=search_opts.num_rows,
            legacy_bound_check=search_opts.legacy_bound_check,
        )
        result = IntegerSearch(bounds, var_cap=search_opts.var_cap).search()
    except OptimizerError as exc:
        logger.warning("branch and bound failed on %s: %s", problem.name, exc)
        return MIPSolution(
            status=exc.status,
            objective_value=None,
            x=None,
            message=str(exc),
        )

    x = [float(value) for value in result.point]
    x.extend(0.0 for _ in range(len(problem.objective) - len(x)))
    return MIPSolution(
        status="optimal",
        objective_value=result.objective_value,
        x=x,
        optimization_needed=True,
        lp=lp_solution,
        search=result,
        message=f"Explored nodes: {result.nodes_explored}",
    )
