"""
Z3 SMT oracle for smt-enumerate.

This module implements the Z3Oracle class, the default oracle. Each
instance owns a private Z3 context so that concurrent sessions never share
native state, and releases it in close().
"""

from __future__ import annotations

from typing import Any

from z3 import (
    And,
    BoolVal,
    Context,
    Distinct,
    Int,
    Not,
    Or,
    Solver,
    sat,
    unsat,
)

from smt_enumerate.oracles.base import BaseOracle
from smt_enumerate.status import Status


class Z3Oracle(BaseOracle):
    """
    Z3 oracle over unbounded integers.

    Comparisons use Z3's operator overloading; logical primitives map to
    the Z3 And/Or/Not/Distinct builders in the oracle's own context.
    """

    name = "z3"

    def __init__(
        self,
        time_limit: float | None = None,
        verbose: int = 0,
        options: str = "",
    ):
        super().__init__(time_limit, verbose, options)

        self._ctx: Context | None = Context()
        self._solver: Solver | None = Solver(ctx=self._ctx)

        # Set time limit if specified
        if self.time_limit:
            self._solver.set("timeout", int(self.time_limit * 1000))

        for key, value in self._parse_options().items():
            self._solver.set(key, value)

    # ========== Variable creation ==========

    def int_var(self, name: str, lb: int | None = None, ub: int | None = None) -> Any:
        """Create an integer variable; bounds become ordinary constraints."""
        self._ensure_open()
        var = Int(name, ctx=self._ctx)
        self.vars[name] = var
        if lb is not None:
            self.add(var >= lb)
        if ub is not None:
            self.add(var <= ub)
        self._log(2, f"Created var {name}")
        return var

    # ========== Logical primitives ==========

    def not_(self, a: Any) -> Any:
        return Not(a)

    def and_(self, args: list[Any]) -> Any:
        return And(*args, self._ctx)

    def or_(self, args: list[Any]) -> Any:
        return Or(*args, self._ctx)

    def distinct(self, args: list[Any]) -> Any:
        if len(args) < 2:
            return BoolVal(True, ctx=self._ctx)
        return Distinct(*args)

    # ========== Solving ==========

    def _assert(self, constraint: Any) -> None:
        self._solver.add(constraint)

    def check(self) -> Status:
        """Run the solver over the current assertions."""
        self._ensure_open()
        self._log(1, f"Checking {len(self._assertions)} assertions with Z3...")

        result = self._solver.check()

        if self.verbose >= 2:
            stats = self._solver.statistics()
            self._log(2, "Z3 Statistics:")
            for key in stats.keys():
                self._log(2, f"  {key}: {stats.get_key_value(key)}")

        if result == sat:
            self._status = Status.SATISFIABLE
        elif result == unsat:
            self._status = Status.UNSATISFIABLE
        else:
            self._status = Status.UNKNOWN
            self._log(1, f"Z3 reason unknown: {self._solver.reason_unknown()}")

        self._log(1, f"Solver finished: {self._status}")
        return self._status

    def model(self) -> Any:
        self._ensure_open()
        self._ensure_sat()
        return self._solver.model()

    def evaluate(self, model: Any, var: Any) -> int:
        return model.eval(var, model_completion=True).as_long()

    # ========== Lifecycle ==========

    def close(self) -> None:
        """Reset the solver and drop every reference into the Z3 context."""
        if self._closed:
            return
        self._closed = True
        if self._solver is not None:
            self._solver.reset()
        self._solver = None
        self.vars.clear()
        self._assertions.clear()
        self._ctx = None
        self._log(1, "Z3 oracle closed")
