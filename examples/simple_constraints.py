"""
Simple constraints: x > 2, y < 10, x + 2*y == 7.

Press space to see the next (x, y) pair, any other key to stop.
Over unbounded integers (z3) the pairs never run out; with --solver ortools
the default variable bounds make the set finite.
"""

import argparse

from smt_enumerate import enumerate_solutions


def main() -> None:
    parser = argparse.ArgumentParser(description="Simple constraints example.")
    parser.add_argument("--solver", default="z3", help="Oracle backend (default: z3)")
    parser.add_argument("--limit", type=int, default=None,
                        help="Print this many solutions without prompting")
    args = parser.parse_args()

    result = enumerate_solutions("simple", solver=args.solver, limit=args.limit)
    print(f"Shown {result.count} solution(s), finished in state {result.state.value}")


if __name__ == "__main__":
    main()
