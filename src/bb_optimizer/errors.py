class OptimizerError(Exception):
    """Base class for solver failures; ``status`` mirrors the solution status string."""

    status = "error"


class InvalidInput(OptimizerError, ValueError):
    status = "invalid"


class Unbounded(OptimizerError):
    status = "unbounded"

    def __init__(self, pivot_column: int) -> None:
        super().__init__(f"Unbounded: no positive entry in pivot column {pivot_column}.")
        self.pivot_column = pivot_column


class NonConvergent(OptimizerError):
    status = "iteration_limit"

    def __init__(self, iterations: int) -> None:
        super().__init__(f"Simplex did not converge within {iterations} pivots.")
        self.iterations = iterations


class OutOfSearchBounds(OptimizerError):
    status = "infeasible"
