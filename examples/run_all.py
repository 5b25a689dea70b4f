#!/usr/bin/env python
"""
Check the smt-enumerate examples end to end.

Every example runs in a subprocess with keys fed to its prompt on stdin.
Its output is then checked: solution counts, distinctness, the
constraints each solution must satisfy and the final status line.
"""

import subprocess
import sys
from pathlib import Path

EXAMPLES_DIR = Path(__file__).parent
PROMPT = "Show next? [space]"


class CheckFailed(Exception):
    pass


def run(script, *args, keys=""):
    """Run ``script`` with ``keys`` on stdin and return its stdout."""
    proc = subprocess.run(
        [sys.executable, str(EXAMPLES_DIR / script), *args],
        input=keys,
        capture_output=True,
        text=True,
        timeout=120,
    )
    if proc.returncode != 0:
        tail = proc.stderr.strip().splitlines()[-1:] or [f"exit code {proc.returncode}"]
        raise CheckFailed(tail[0])
    return proc.stdout


def shown_lines(output):
    """Output lines without the prompt and the blanks that erase it."""
    lines = (line.strip() for line in output.replace("\r", "\n").splitlines())
    return [line for line in lines if line and line != PROMPT]


def expect(condition, message):
    if not condition:
        raise CheckFailed(message)


def pairs_of(lines):
    pairs = [tuple(int(v) for v in line.split(", ")) for line in lines]
    for x, y in pairs:
        expect(x > 2 and y < 10 and x + 2 * y == 7, f"({x}, {y}) violates the constraints")
    expect(len(set(pairs)) == len(pairs), "a pair was shown twice")
    return pairs


def grids_of(lines, n):
    expect(len(lines) % n == 0, f"{len(lines)} rows do not form {n}x{n} grids")
    grids = [tuple(lines[i:i + n]) for i in range(0, len(lines), n)]
    for grid in grids:
        values = [int(v) for row in grid for v in row.split()]
        expect(sorted(values) == list(range(1, n * n + 1)), f"grid {grid} is not a permutation")
    expect(len(set(grids)) == len(grids), "a grid was shown twice")
    return grids


def check_simple_interactive():
    """Three keys read, three distinct pairs shown, stopped by the user."""
    out = run("simple_constraints.py", keys="  q")
    expect(out.count(PROMPT) == 3, f"expected 3 prompts, saw {out.count(PROMPT)}")
    lines = shown_lines(out)
    expect(lines[0] == "(x > 2, y < 10, x + 2*y == 7)", "missing problem description")
    expect(lines[-1] == "Shown 3 solution(s), finished in state done_user_stop",
           f"unexpected summary: {lines[-1]}")
    expect(len(pairs_of(lines[1:-1])) == 3, "expected 3 pairs")


def check_simple_ortools_limit():
    """--limit 5 prints five pairs and never prompts."""
    out = run("simple_constraints.py", "--solver", "ortools", "--limit", "5")
    expect(PROMPT not in out, "prompted in limit mode")
    lines = shown_lines(out)
    expect(len(pairs_of(lines[1:-1])) == 5, "expected 5 pairs")


def check_grid_interactive():
    """One space then end of input: two grids, two prompts."""
    out = run("distinct_grid.py", "-n", "3", keys=" ")
    expect(out.count(PROMPT) == 2, f"expected 2 prompts, saw {out.count(PROMPT)}")
    expect(len(grids_of(shown_lines(out)[1:], 3)) == 2, "expected 2 grids")


def check_grid_exhaustion():
    """All 24 distinct 2x2 grids, then UNSATISFIABLE."""
    lines = shown_lines(run("distinct_grid.py", "-n", "2", "--all"))
    expect(lines[-1] == "UNSATISFIABLE", f"final status was {lines[-1]!r}")
    expect(len(grids_of(lines[1:-1], 2)) == 24, "expected 24 grids")


def check_incremental():
    """Four increasing quadruples in [0, 6] sum to 10."""
    lines = shown_lines(run("incremental.py"))
    expect(lines[-1] == "4 solutions found (UNSATISFIABLE).", f"unexpected summary: {lines[-1]}")
    expect(len(set(lines[:-1])) == 4, "expected 4 distinct solutions")


CHECKS = [
    check_simple_interactive,
    check_simple_ortools_limit,
    check_grid_interactive,
    check_grid_exhaustion,
    check_incremental,
]


def main():
    failures = 0
    for check in CHECKS:
        name = check.__name__[len("check_"):]
        try:
            check()
        except (CheckFailed, subprocess.TimeoutExpired) as e:
            failures += 1
            print(f"FAIL {name}: {e}")
        else:
            print(f"ok   {name}")

    print(f"{len(CHECKS) - failures}/{len(CHECKS)} examples behaved as expected")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
