"""Command-line interface."""

from __future__ import annotations

import argparse

from smt_enumerate.problems import PROBLEMS
from smt_enumerate.solver import enumerate_solutions, supported_solvers


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="smt-enumerate",
        description="Enumerate distinct solutions of integer constraint problems.",
    )
    ap.add_argument("problem", nargs="?", default="simple", choices=sorted(PROBLEMS),
                    help="Problem to solve (default: simple)")
    ap.add_argument("--solver", default="z3", choices=supported_solvers(),
                    help="Oracle backend (default: z3)")
    ap.add_argument("--size", type=int, default=3, help="Grid size for the grid problem")
    ap.add_argument("--time-limit", type=float, default=None,
                    help="Time limit per check in seconds")
    ap.add_argument("--verbose", type=int, default=0, help="Verbosity level")
    ap.add_argument("--options", default="", help="Oracle options, key=value[,key=value]")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--limit", type=positive_int, default=None,
                      help="Print this many solutions without prompting")
    mode.add_argument("--all", action="store_true",
                      help="Print every solution without prompting")
    args = ap.parse_args(argv)

    problem_kwargs = {"size": args.size} if args.problem == "grid" else {}
    limit = "all" if args.all else args.limit

    enumerate_solutions(
        args.problem,
        solver=args.solver,
        time_limit=args.time_limit,
        verbose=args.verbose,
        options=args.options,
        limit=limit,
        **problem_kwargs,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
