"""
Solution strategies: how a model becomes a solution, how a solution is
excluded from the search space, and how it is shown to the user.

Alternate problem shapes plug in here without touching the loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence

from smt_enumerate.solution import Solution

if TYPE_CHECKING:
    from smt_enumerate.oracles.base import BaseOracle


class SolutionStrategy(ABC):
    """Evaluate, exclude and present solutions for one problem shape."""

    def evaluate(
        self, oracle: "BaseOracle", model: Any, variables: Sequence[Any]
    ) -> Solution:
        """Read one value per tracked variable, in tracked order."""
        return Solution(tuple(oracle.evaluate(model, v) for v in variables))

    def exclude(
        self, oracle: "BaseOracle", variables: Sequence[Any], solution: Solution
    ) -> Any:
        """
        Build the clause that forbids exactly this full assignment.

        The clause is a disjunction of ``v_i != value_i``, so any assignment
        agreeing with ``solution`` on only some variables stays feasible.
        """
        if len(variables) != len(solution):
            raise ValueError(
                f"Solution has {len(solution)} values for {len(variables)} variables"
            )
        return oracle.or_([oracle.ne(v, val) for v, val in zip(variables, solution)])

    @abstractmethod
    def present(self, solution: Solution) -> str:
        """Format a solution for display."""
        raise NotImplementedError


class VectorStrategy(SolutionStrategy):
    """Show the values on one line, comma separated."""

    def __init__(self, separator: str = ", "):
        self.separator = separator

    def present(self, solution: Solution) -> str:
        return self.separator.join(str(v) for v in solution)


class GridStrategy(SolutionStrategy):
    """Show the values as rows of ``width`` cells, right-aligned."""

    def __init__(self, width: int):
        if width < 1:
            raise ValueError(f"Grid width must be positive, got {width}")
        self.width = width

    def present(self, solution: Solution) -> str:
        if len(solution) % self.width != 0:
            raise ValueError(
                f"Cannot lay out {len(solution)} values in rows of {self.width}"
            )
        cells = [str(v) for v in solution]
        pad = max((len(c) for c in cells), default=0)
        rows = []
        for i in range(0, len(cells), self.width):
            rows.append(" ".join(c.rjust(pad) for c in cells[i : i + self.width]))
        return "\n".join(rows)
