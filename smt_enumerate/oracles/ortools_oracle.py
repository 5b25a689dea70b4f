"""
OR-Tools CP-SAT oracle for smt-enumerate.

CP-SAT has no native boolean expression language, so every comparison is
reified into a boolean literal. Literals then compose freely under
not_/and_/or_, which is what exclusion clauses need.
"""

from __future__ import annotations

from typing import Any

from ortools.sat.python import cp_model

from smt_enumerate.oracles.base import BaseOracle
from smt_enumerate.status import Status

DEFAULT_BOUNDS = (-10_000, 10_000)


class ORToolsOracle(BaseOracle):
    """
    OR-Tools CP-SAT oracle over bounded integers.

    Variables declared without bounds get ``default_bounds``. The model is
    re-solved from scratch on each check() with every constraint added so far.
    """

    name = "ortools"

    def __init__(
        self,
        time_limit: float | None = None,
        verbose: int = 0,
        options: str = "",
        default_bounds: tuple[int, int] = DEFAULT_BOUNDS,
    ):
        super().__init__(time_limit, verbose, options)

        lb, ub = default_bounds
        if lb > ub:
            raise ValueError(f"Invalid default bounds: [{lb}, {ub}]")
        self.default_bounds = (lb, ub)

        # OR-Tools model and solver
        self.cpmodel: cp_model.CpModel | None = cp_model.CpModel()
        self.solver: cp_model.CpSolver | None = cp_model.CpSolver()

        # Configure solver
        if self.time_limit is not None:
            self.solver.parameters.max_time_in_seconds = self.time_limit

        if self.verbose >= 2:
            self.solver.parameters.log_search_progress = True

        for key, value in self._parse_options().items():
            setattr(self.solver.parameters, key, value)

    # ========== Variable creation ==========

    def int_var(self, name: str, lb: int | None = None, ub: int | None = None) -> Any:
        """Create integer variable with range domain."""
        self._ensure_open()
        lo = self.default_bounds[0] if lb is None else lb
        hi = self.default_bounds[1] if ub is None else ub
        var = self.cpmodel.NewIntVar(lo, hi, name)
        self.vars[name] = var
        self._log(2, f"Created var {name} in [{lo}, {hi}]")
        return var

    # ========== Comparison primitives ==========

    def _reify(self, holds: Any, fails: Any) -> Any:
        """Return a literal that is true exactly when ``holds`` is satisfied."""
        result = self.cpmodel.NewBoolVar("")
        self.cpmodel.Add(holds).OnlyEnforceIf(result)
        self.cpmodel.Add(fails).OnlyEnforceIf(result.Not())
        return result

    def eq(self, a: Any, b: Any) -> Any:
        return self._reify(a == b, a != b)

    def ne(self, a: Any, b: Any) -> Any:
        return self._reify(a != b, a == b)

    def lt(self, a: Any, b: Any) -> Any:
        return self._reify(a < b, a >= b)

    def le(self, a: Any, b: Any) -> Any:
        return self._reify(a <= b, a > b)

    def gt(self, a: Any, b: Any) -> Any:
        return self._reify(a > b, a <= b)

    def ge(self, a: Any, b: Any) -> Any:
        return self._reify(a >= b, a < b)

    # ========== Logical primitives ==========

    def not_(self, a: Any) -> Any:
        return a.Not()

    def and_(self, args: list[Any]) -> Any:
        result = self.cpmodel.NewBoolVar("")
        self.cpmodel.AddBoolAnd(args).OnlyEnforceIf(result)
        self.cpmodel.AddBoolOr([a.Not() for a in args]).OnlyEnforceIf(result.Not())
        return result

    def or_(self, args: list[Any]) -> Any:
        result = self.cpmodel.NewBoolVar("")
        self.cpmodel.AddBoolOr(args).OnlyEnforceIf(result)
        self.cpmodel.AddBoolAnd([a.Not() for a in args]).OnlyEnforceIf(result.Not())
        return result

    def distinct(self, args: list[Any]) -> Any:
        pairs = [
            self.ne(args[i], args[j])
            for i in range(len(args))
            for j in range(i + 1, len(args))
        ]
        return self.and_(pairs)

    # ========== Solving ==========

    def _assert(self, constraint: Any) -> None:
        if isinstance(constraint, (bool, cp_model.BoundedLinearExpression)):
            self.cpmodel.Add(constraint)
        else:
            # Reified literal from one of the primitives above
            self.cpmodel.AddBoolOr([constraint])

    def check(self) -> Status:
        """Solve the model and return status."""
        self._ensure_open()
        self._log(1, "Starting OR-Tools solver...")
        status = self.solver.Solve(self.cpmodel)

        if status in (cp_model.OPTIMAL, cp_model.FEASIBLE):
            self._status = Status.SATISFIABLE
        elif status == cp_model.INFEASIBLE:
            self._status = Status.UNSATISFIABLE
        else:
            self._status = Status.UNKNOWN

        self._log(1, f"Solver finished with status: {self._status}")
        return self._status

    def model(self) -> Any:
        """The solver itself holds the last solution's values."""
        self._ensure_open()
        self._ensure_sat()
        return self.solver

    def evaluate(self, model: Any, var: Any) -> int:
        return int(model.Value(var))

    # ========== Lifecycle ==========

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.cpmodel = None
        self.solver = None
        self.vars.clear()
        self._assertions.clear()
        self._log(1, "OR-Tools oracle closed")
