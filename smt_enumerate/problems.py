"""
Built-in problems.

A problem builder declares variables and asserts constraints on a fresh
oracle, and returns what the enumerator needs to run: the tracked
variables in display order, a strategy and a human-readable description.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from smt_enumerate.strategies import GridStrategy, SolutionStrategy, VectorStrategy

if TYPE_CHECKING:
    from smt_enumerate.oracles.base import BaseOracle


@dataclass(frozen=True)
class ProblemInstance:
    """A problem loaded into an oracle."""

    name: str
    description: str
    variables: tuple[Any, ...]
    strategy: SolutionStrategy


def simple_constraints(oracle: "BaseOracle") -> ProblemInstance:
    """x > 2, y < 10, x + 2*y == 7 over the integers."""
    x = oracle.int_var("x")
    y = oracle.int_var("y")

    oracle.add(
        oracle.and_(
            [
                oracle.gt(x, 2),
                oracle.lt(y, 10),
                oracle.eq(x + 2 * y, 7),
            ]
        )
    )

    return ProblemInstance(
        name="simple",
        description="(x > 2, y < 10, x + 2*y == 7)",
        variables=(x, y),
        strategy=VectorStrategy(),
    )


def distinct_grid(oracle: "BaseOracle", size: int = 3) -> ProblemInstance:
    """A size x size grid of pairwise distinct values in [1, size*size]."""
    if size < 1:
        raise ValueError(f"Grid size must be positive, got {size}")

    top = size * size
    cells = [
        oracle.int_var(f"x_{r}_{c}", 1, top)
        for r in range(size)
        for c in range(size)
    ]
    oracle.add(oracle.distinct(cells))

    return ProblemInstance(
        name="grid",
        description=f"{size}x{size} grid, all distinct, values in [1, {top}]",
        variables=tuple(cells),
        strategy=GridStrategy(size),
    )


PROBLEMS: dict[str, Callable[..., ProblemInstance]] = {
    "simple": simple_constraints,
    "grid": distinct_grid,
}


def build_problem(name: str, oracle: "BaseOracle", **kwargs: Any) -> ProblemInstance:
    """Load the named problem into ``oracle``."""
    builder = PROBLEMS.get(name.lower())
    if builder is None:
        raise ValueError(
            f"Unknown problem: {name}. Available problems: {sorted(PROBLEMS)}"
        )
    return builder(oracle, **kwargs)
