"""
Main enumerate_solutions() function for smt-enumerate.

This module provides the entry point: pick an oracle, load a problem into
it and run the enumeration loop, releasing the oracle on every exit path.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from smt_enumerate.enumerator import (
    EnumerationResult,
    SolutionEnumerator,
    check_limit,
    iter_solutions,
)
from smt_enumerate.oracles import KNOWN_ORACLES, get_oracle, oracle_names
from smt_enumerate.problems import build_problem
from smt_enumerate.status import EnumerationState


def supported_solvers() -> list[str]:
    """Return the built-in oracle names plus any registered with register_oracle()."""
    return oracle_names()


def enumerate_solutions(
    problem: str = "simple",
    *,
    solver: str = "z3",
    time_limit: float | None = None,
    verbose: int = 0,
    options: str = "",
    read_key: Callable[[], str] | None = None,
    stream: TextIO | None = None,
    limit: int | str | None = None,
    **problem_kwargs: Any,
) -> EnumerationResult:
    """
    Enumerate solutions of a built-in problem.

    Args:
        problem: Problem name - "simple" or "grid"
        solver: Oracle name - "z3", "ortools" or a name passed to
            register_oracle()
        time_limit: Time limit per satisfiability check in seconds
        verbose: Verbosity level (0=quiet, 1=normal, 2=detailed)
        options: Oracle-specific options string ("key=value,...")
        read_key: Single-key reader for the interactive prompt
        stream: Output stream (stdout by default)
        limit: None for interactive mode; an int or "all" to print
            solutions without prompting
        **problem_kwargs: Extra arguments for the problem builder
            (e.g. size=4 for "grid")

    Returns:
        EnumerationResult with the terminal state, the last oracle status
        and the number of solutions shown.

    Example:
        from smt_enumerate import enumerate_solutions

        enumerate_solutions("grid", solver="z3", limit=3)
    """
    solver_lower = solver.lower()
    if solver_lower not in supported_solvers():
        raise ValueError(
            f"Unknown solver: {solver}. Supported solvers: {supported_solvers()}"
        )

    oracle_class = get_oracle(solver_lower)
    if oracle_class is None:
        if solver_lower in KNOWN_ORACLES:
            raise ImportError(
                f"Oracle '{solver}' is not available. "
                f"Install the required package: pip install smt-enumerate[{solver_lower}]"
            )
        raise ImportError(f"Oracle '{solver}' is registered without a class")

    max_count = _resolve_limit(limit)

    if stream is None:
        stream = sys.stdout

    with oracle_class(time_limit=time_limit, verbose=verbose, options=options) as oracle:
        instance = build_problem(problem, oracle, **problem_kwargs)
        print(instance.description, file=stream, flush=True)

        if limit is None:
            enumerator = SolutionEnumerator(
                oracle,
                instance.variables,
                instance.strategy,
                read_key=read_key,
                stream=stream,
                verbose=verbose,
            )
            return enumerator.run()

        return _print_solutions(oracle, instance, max_count, stream)


def _resolve_limit(limit: int | str | None) -> int | None:
    """Turn ``limit`` into a solution count; "all" and None mean no cap."""
    if limit is None or limit == "all":
        return None
    max_count = int(limit)
    check_limit(max_count)
    return max_count


def _print_solutions(oracle, instance, max_count: int | None, stream: TextIO) -> EnumerationResult:
    """Print up to ``max_count`` solutions (all when None) without prompting."""
    count = 0
    for solution in iter_solutions(oracle, instance.variables, instance.strategy, max_count):
        count += 1
        print(instance.strategy.present(solution), file=stream, flush=True)

    if max_count is not None and count >= max_count:
        return EnumerationResult(
            state=EnumerationState.DONE_USER_STOP, status=oracle.status, count=count
        )

    print(oracle.status, file=stream, flush=True)
    return EnumerationResult(
        state=EnumerationState.DONE_UNSAT, status=oracle.status, count=count
    )
