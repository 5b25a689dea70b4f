"""
Distinct grid: an n x n grid of pairwise distinct values in [1, n*n].

Each solution is printed as n rows of n values.
"""

import argparse

from smt_enumerate import enumerate_solutions


def main() -> None:
    parser = argparse.ArgumentParser(description="Distinct grid example.")
    parser.add_argument("-n", type=int, default=3, help="Grid size (default: 3)")
    parser.add_argument("--solver", default="z3", help="Oracle backend (default: z3)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--limit", type=int, default=None,
                      help="Print this many grids without prompting")
    mode.add_argument("--all", action="store_true",
                      help="Print every grid without prompting")
    args = parser.parse_args()

    limit = "all" if args.all else args.limit
    enumerate_solutions("grid", solver=args.solver, limit=limit, size=args.n)


if __name__ == "__main__":
    main()
