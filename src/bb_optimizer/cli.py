import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from pydantic import ValidationError

from .errors import InvalidInput
from .lp.parser import parse_problem_text
from .mip.branch_and_bound import solve_mip_branch_and_bound
from .schemas import LPProblem, MIPSolution, SearchOptions, SolveOptions


def _read_number(prompt: str, input_fn: Callable[[str], str]) -> float:
    text = input_fn(prompt).strip()
    try:
        return float(text)
    except ValueError as exc:
        raise InvalidInput(f"'{text}' is not a number.") from exc


def _read_count(prompt: str, input_fn: Callable[[str], str]) -> int:
    text = input_fn(prompt).strip()
    try:
        count = int(text)
    except ValueError as exc:
        raise InvalidInput(f"'{text}' is not a whole number.") from exc
    if count < 1:
        raise InvalidInput(f"Expected a positive count, got {count}.")
    return count


def read_problem(
    input_fn: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> LPProblem:
    """
    Prompt for the constraint count, the variable count, every constraint's
    coefficients followed by its bound, then the objective coefficients.
    """

    num_constraints = _read_count("Enter the number of constraints: ", input_fn)
    num_vars = _read_count("Enter the number of variables: ", input_fn)

    write("Enter the coefficients of each constraint (the last one is the bound):")
    constraints: List[List[float]] = []
    for i in range(num_constraints):
        write(f"Constraint {i + 1}:")
        row = [_read_number(f"Coefficient {j + 1}: ", input_fn) for j in range(num_vars + 1)]
        constraints.append(row)

    write("Enter the objective coefficients:")
    objective = [_read_number(f"Coefficient {j + 1}: ", input_fn) for j in range(num_vars)]
    return LPProblem(name="interactive", constraints=constraints, objective=objective)


def format_solution(solution: MIPSolution) -> str:
    if not solution.optimization_needed:
        return solution.message
    lines = [f"Optimal objective value: {solution.objective_value:g}"]
    lines.append("Integer values of the optimal solution:")
    point = solution.search.point if solution.search is not None else []
    for idx, value in enumerate(point):
        lines.append(f"x{idx + 1} = {value}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bb-optimizer",
        description="Solve max c^T x, Ax <= b, x >= 0 by simplex, then search integer points.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--model", type=Path, default=None, help="LPProblem JSON file")
    source.add_argument("--expr", type=str, default=None, help="Text model, e.g. 'maximize 3x + 4y subject to ...'")
    parser.add_argument("--cap", type=int, default=100, help="Upper bound on each integer variable")
    parser.add_argument("--max-iters", type=int, default=10_000, help="Simplex pivot limit")
    parser.add_argument(
        "--legacy-bound-check",
        action="store_true",
        help="Reuse the first row's second coefficient in later rows during the integer search",
    )
    parser.add_argument("--json", action="store_true", help="Print the full solution as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log solver progress")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.model is not None:
            problem = LPProblem.model_validate(json.loads(args.model.read_text()))
        elif args.expr is not None:
            problem = parse_problem_text(args.expr)
        else:
            problem = read_problem()
        opts = SolveOptions(max_iters=args.max_iters)
        search_opts = SearchOptions(var_cap=args.cap, legacy_bound_check=args.legacy_bound_check)
    except (InvalidInput, ValidationError, OSError, json.JSONDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    solution = solve_mip_branch_and_bound(problem, opts, search_opts)
    if solution.status != "optimal":
        print(f"error: {solution.message}", file=sys.stderr)
        return 1

    if args.json:
        print(solution.model_dump_json(indent=2))
    else:
        print(format_solution(solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
