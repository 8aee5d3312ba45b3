import math
from typing import List, Sequence, Tuple

import numpy as np

from ..errors import InvalidInput


def validate_problem(
    constraints: Sequence[Sequence[float]], objective: Sequence[float]
) -> Tuple[int, int]:
    """
    Check the dense ``[coefficients..., bound]`` rows against the objective.
    Return ``(m, n)``: number of constraints and number of decision variables.
    """

    if len(constraints) == 0:
        raise InvalidInput("At least one constraint row is required.")

    width = len(constraints[0])
    if width < 2:
        raise InvalidInput("Constraint rows need at least one coefficient and a bound.")
    for idx, row in enumerate(constraints):
        if len(row) != width:
            raise InvalidInput(
                f"Constraint {idx + 1} has {len(row)} entries; expected {width}."
            )
        for value in row:
            if not math.isfinite(value):
                raise InvalidInput(f"Constraint {idx + 1} contains a non-finite value.")
        if row[-1] < 0:
            raise InvalidInput(
                f"Constraint {idx + 1} has negative bound {row[-1]}; "
                "the all-slack starting basis requires b >= 0."
            )

    n = width - 1
    if len(objective) != n:
        raise InvalidInput(f"Objective has {len(objective)} coefficients; expected {n}.")
    if not all(math.isfinite(value) for value in objective):
        raise InvalidInput("Objective contains a non-finite value.")

    return len(constraints), n


def build_tableau(
    constraints: Sequence[Sequence[float]], objective: Sequence[float]
) -> Tuple[np.ndarray, List[int]]:
    """
    Build the ``(m+1) x (n+m+1)`` simplex tableau for ``max c^T x, Ax <= b``:
    constraint rows with an identity slack block, the objective row negated.
    Return the tableau and the initial (all-slack) basis.
    """

    m, n = validate_problem(constraints, objective)
    tableau = np.zeros((m + 1, n + m + 1), dtype=float)

    for i, row in enumerate(constraints):
        tableau[i, :n] = row[:n]
        tableau[i, n + i] = 1.0
        tableau[i, n + m] = row[n]

    tableau[m, :n] = -np.asarray(objective, dtype=float)
    basis = [n + i for i in range(m)]
    return tableau, basis


def is_integral(values: Sequence[float], tol: float = 1e-6) -> bool:
    return all(abs(value - round(value)) <= tol for value in values)
