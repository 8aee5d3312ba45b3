#!/usr/bin/env python3
import argparse
import json
from pathlib import Path

from bb_optimizer.instances import generate_random_problem


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random feasible, bounded LP instances.")
    parser.add_argument("--vars", type=int, default=2, help="Number of variables")
    parser.add_argument("--constraints", type=int, default=2, help="Number of constraints")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_random_problem(args.vars, args.constraints, (args.seed or 0) + idx)
        for idx in range(args.count)
    ]
    payload = [instance.model_dump() for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
