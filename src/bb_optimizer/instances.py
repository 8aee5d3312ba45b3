import random
from typing import List, Optional

from .schemas import LPProblem


def generate_random_problem(
    num_vars: int, num_constraints: int, seed: Optional[int] = None
) -> LPProblem:
    """Positive coefficients and bounds, so the origin is feasible and the LP is bounded."""

    rng = random.Random(seed)
    constraints: List[List[float]] = []
    for _ in range(num_constraints):
        row = [rng.uniform(0.5, 5.0) for _ in range(num_vars)]
        row.append(rng.uniform(num_vars * 2.0, num_vars * 6.0))
        constraints.append(row)
    objective = [rng.uniform(1.0, 4.0) for _ in range(num_vars)]
    return LPProblem(
        name=f"random-{seed}",
        constraints=constraints,
        objective=objective,
    )
