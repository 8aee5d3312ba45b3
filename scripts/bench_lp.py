#!/usr/bin/env python3
import json
import time
from pathlib import Path

from bb_optimizer.instances import generate_random_problem
from bb_optimizer.lp.simplex import simplex_solve
from bb_optimizer.mip.branch_and_bound import solve_mip_branch_and_bound
from bb_optimizer.schemas import LPProblem, SearchOptions, SolveOptions

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


def main() -> None:
    opts = SolveOptions()
    search_opts = SearchOptions()
    cases = [
        (path.name, LPProblem.model_validate(json.loads(path.read_text())))
        for path in sorted(EXAMPLES.glob("*.json"))
    ]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_problem(2, 2, seed)))

    print("name,lp_status,lp_objective,pivots,mip_objective,search_nodes,time_ms")
    for name, problem in cases:
        start = time.perf_counter()
        lp = simplex_solve(problem, opts)
        mip = solve_mip_branch_and_bound(problem, opts, search_opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        nodes = mip.search.nodes_explored if mip.search is not None else 0
        print(
            f"{name},{lp.status},{lp.objective_value},{lp.iterations},"
            f"{mip.objective_value},{nodes},{elapsed_ms:.2f}"
        )


if __name__ == "__main__":
    main()
