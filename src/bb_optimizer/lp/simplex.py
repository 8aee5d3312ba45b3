import logging
from typing import List, Optional, Sequence

import numpy as np

from .utils import build_tableau, is_integral
from ..errors import NonConvergent, OptimizerError, Unbounded
from ..schemas import LPProblem, LPSolution, SolveOptions

logger = logging.getLogger(__name__)


class SimplexSolver:
    """
    Tableau primal simplex for ``max c^T x, Ax <= b, x >= 0`` starting from the
    all-slack basis (so every bound must be non-negative).

    The last tableau and basis stay on the instance after ``solve`` so callers can
    read per-variable values and the objective; the next ``solve`` replaces them.
    """

    def __init__(self, options: Optional[SolveOptions] = None) -> None:
        self.options = options or SolveOptions()
        self.tableau: np.ndarray = np.zeros((0, 0))
        self.basis: List[int] = []
        self.num_vars = 0
        self.num_constraints = 0
        self.iterations = 0

    def initialize_tableau(
        self, constraints: Sequence[Sequence[float]], objective: Sequence[float]
    ) -> None:
        self.tableau, self.basis = build_tableau(constraints, objective)
        self.num_constraints = self.tableau.shape[0] - 1
        self.num_vars = self.tableau.shape[1] - self.num_constraints - 1
        self.iterations = 0

    def find_pivot_column(self) -> int:
        reduced = self.tableau[-1, :-1]
        # argmin returns the first occurrence on ties
        column = int(np.argmin(reduced))
        return column if reduced[column] < 0 else 0

    def find_pivot_row(self, pivot_column: int) -> int:
        tol = self.options.tol
        pivot_row = -1
        min_ratio = np.inf
        for i in range(self.num_constraints):
            entry = self.tableau[i, pivot_column]
            if entry > tol:
                ratio = self.tableau[i, -1] / entry
                if ratio < min_ratio:
                    min_ratio = ratio
                    pivot_row = i
        if pivot_row < 0:
            raise Unbounded(pivot_column)
        return pivot_row

    def perform_pivot(self, pivot_row: int, pivot_column: int) -> None:
        T = self.tableau
        T[pivot_row, :] /= T[pivot_row, pivot_column]
        for i in range(T.shape[0]):
            if i != pivot_row:
                T[i, :] -= T[i, pivot_column] * T[pivot_row, :]
        self.basis[pivot_row] = pivot_column

    def is_optimal(self) -> bool:
        return bool(np.all(self.tableau[-1, :-1] >= -self.options.tol))

    def solve(
        self, constraints: Sequence[Sequence[float]], objective: Sequence[float]
    ) -> List[float]:
        """
        Run simplex to optimality and return the RHS column, one value per
        constraint row (length m, not n). ``variable_values`` maps the basis back
        to decision variables.
        """

        self.initialize_tableau(constraints, objective)

        while not self.is_optimal():
            if self.iterations >= self.options.max_iters:
                raise NonConvergent(self.iterations)
            pivot_column = self.find_pivot_column()
            pivot_row = self.find_pivot_row(pivot_column)
            logger.debug(
                "pivot %d: row %d, column %d (reduced cost %.6g)",
                self.iterations,
                pivot_row,
                pivot_column,
                self.tableau[-1, pivot_column],
            )
            self.perform_pivot(pivot_row, pivot_column)
            self.iterations += 1

        logger.info(
            "simplex optimal after %d pivots, objective %.6g",
            self.iterations,
            self.objective_value(),
        )
        return [float(value) for value in self.tableau[: self.num_constraints, -1]]

    def variable_values(self) -> List[float]:
        x = [0.0] * self.num_vars
        for row, column in enumerate(self.basis):
            if column < self.num_vars:
                x[column] = float(self.tableau[row, -1])
        return x

    def objective_value(self) -> float:
        return float(self.tableau[-1, -1])

    def is_integer_solution(self, solution: Sequence[float]) -> bool:
        return is_integral(solution, self.options.integrality_tol)

    def has_integer_solution(
        self, constraints: Sequence[Sequence[float]], objective: Sequence[float]
    ) -> bool:
        return self.is_integer_solution(self.solve(constraints, objective))


def simplex_solve(problem: LPProblem, opts: Optional[SolveOptions] = None) -> LPSolution:
    """Solve ``problem`` and report failures as a status instead of raising."""

    solver = SimplexSolver(opts)
    try:
        row_values = solver.solve(problem.constraints, problem.objective)
    except OptimizerError as exc:
        logger.warning("simplex failed on %s: %s", problem.name, exc)
        return LPSolution(
            status=exc.status,
            objective_value=None,
            row_values=None,
            x=None,
            iterations=solver.iterations,
            message=str(exc),
        )

    return LPSolution(
        status="optimal",
        objective_value=solver.objective_value(),
        row_values=row_values,
        x=solver.variable_values(),
        is_integral=solver.is_integer_solution(row_values),
        iterations=solver.iterations,
        message="",
    )
