"""
Incremental enumeration without prompting.

Builds a small constraint problem directly on an oracle, then pulls
solutions one by one with iter_solutions(). Each solution is excluded
from the oracle before the next check, so no assignment repeats.
"""

import argparse

from smt_enumerate import VectorStrategy, get_oracle, iter_solutions


def main() -> None:
    parser = argparse.ArgumentParser(description="Incremental enumeration example.")
    parser.add_argument("--solver", default="z3", help="Oracle backend (default: z3)")
    parser.add_argument("--verbose", type=int, default=0, help="Verbosity level")
    args = parser.parse_args()

    with get_oracle(args.solver)(verbose=args.verbose) as oracle:
        x = oracle.int_vars([f"x{i}" for i in range(4)], 0, 6)

        oracle.add(
            oracle.distinct(x),
            *[oracle.lt(x[i], x[i + 1]) for i in range(3)],
            oracle.eq(x[0] + x[1] + x[2] + x[3], 10),
        )

        cnt = 0
        for solution in iter_solutions(oracle, x, VectorStrategy()):
            cnt += 1
            print(f"Solution {cnt}: {list(solution)}")
        print(f"{cnt} solutions found ({oracle.status}).")


if __name__ == "__main__":
    main()
