"""
Base oracle class for smt-enumerate.

An oracle wraps an external satisfiability engine. It owns the constraint
store for one enumeration session and exposes the small surface the
enumeration loop needs: declare integer variables, build constraints,
assert them, check satisfiability and read values from a model.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

from smt_enumerate.status import Status


class BaseOracle(ABC):
    """
    Base class for oracle backends.

    Subclasses should:
    1. Create their native solver objects in __init__
    2. Implement int_var() to declare integer variables
    3. Implement _assert() to add a constraint to the native solver
    4. Implement check(), model() and evaluate()
    5. Override the logical primitives (not_, and_, or_, distinct)
    6. Implement close() to release native resources

    Attributes:
        vars: Mapping from variable name to solver variable
        time_limit: Time limit per check in seconds (None for no limit)
        verbose: Verbosity level
        options: Oracle-specific options string ("key=value,key=value")
    """

    name: str = "base"

    def __init__(
        self,
        time_limit: float | None = None,
        verbose: int = 0,
        options: str = "",
    ):
        self.time_limit = time_limit
        self.verbose = verbose
        self.options = options

        # Variable mapping: name -> solver var
        self.vars: dict[str, Any] = {}

        # Every constraint asserted so far, in order. Only appended to
        # while open; close() discards it.
        self._assertions: list[Any] = []

        self._status: Status = Status.UNKNOWN
        self._closed = False

    # ========== Abstract methods to implement ==========

    @abstractmethod
    def int_var(self, name: str, lb: int | None = None, ub: int | None = None) -> Any:
        """Declare an integer variable, optionally bounded to [lb, ub]."""
        raise NotImplementedError

    @abstractmethod
    def check(self) -> Status:
        """Check satisfiability of everything asserted so far."""
        raise NotImplementedError

    @abstractmethod
    def model(self) -> Any:
        """
        Return the current model.

        Only valid after check() returned SATISFIABLE.
        """
        raise NotImplementedError

    @abstractmethod
    def evaluate(self, model: Any, var: Any) -> int:
        """Return the concrete integer value of ``var`` in ``model``."""
        raise NotImplementedError

    @abstractmethod
    def _assert(self, constraint: Any) -> None:
        """Add one constraint to the native solver."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Release native solver resources. Must be idempotent."""
        raise NotImplementedError

    # ========== Constraint store ==========

    def add(self, *constraints: Any) -> None:
        """Assert constraints. There is no way to retract them."""
        self._ensure_open()
        for constraint in constraints:
            self._assert(constraint)
            self._assertions.append(constraint)
            self._log(2, f"Asserted: {constraint}")

    def assertions(self) -> list[Any]:
        """Return a copy of every constraint asserted so far."""
        return list(self._assertions)

    def describe(self) -> list[str]:
        """Return the asserted constraints as text."""
        return [str(c) for c in self._assertions]

    def int_vars(
        self, names: Iterable[str], lb: int | None = None, ub: int | None = None
    ) -> list[Any]:
        """Declare several integer variables sharing the same bounds."""
        return [self.int_var(n, lb, ub) for n in names]

    @property
    def status(self) -> Status:
        """Status of the last check()."""
        return self._status

    @property
    def closed(self) -> bool:
        return self._closed

    # ========== Comparison primitives (override in subclass) ==========

    def eq(self, a: Any, b: Any) -> Any:
        return a == b

    def ne(self, a: Any, b: Any) -> Any:
        return a != b

    def lt(self, a: Any, b: Any) -> Any:
        return a < b

    def le(self, a: Any, b: Any) -> Any:
        return a <= b

    def gt(self, a: Any, b: Any) -> Any:
        return a > b

    def ge(self, a: Any, b: Any) -> Any:
        return a >= b

    # ========== Logical primitives (override in subclass) ==========

    def not_(self, a: Any) -> Any:
        raise NotImplementedError("Not not supported by this oracle")

    def and_(self, args: list[Any]) -> Any:
        raise NotImplementedError("And not supported by this oracle")

    def or_(self, args: list[Any]) -> Any:
        raise NotImplementedError("Or not supported by this oracle")

    def distinct(self, args: list[Any]) -> Any:
        raise NotImplementedError("Distinct not supported by this oracle")

    # ========== Lifecycle ==========

    def __enter__(self) -> "BaseOracle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"Oracle '{self.name}' is closed")

    def _ensure_sat(self) -> None:
        if self._status is not Status.SATISFIABLE:
            raise RuntimeError(
                f"No model available: last check returned {self._status}"
            )

    # ========== Utility methods ==========

    def _log(self, level: int, msg: str) -> None:
        """Log message if verbosity is high enough."""
        if self.verbose >= level:
            print(msg)

    def _parse_options(self) -> dict[str, Any]:
        """
        Parse the options string into a dict.

        Entries are separated by commas or whitespace, each of the form
        ``key=value``. Values are coerced to bool, int or float when possible.
        """
        parsed: dict[str, Any] = {}
        for item in self.options.replace(",", " ").split():
            if "=" not in item:
                raise ValueError(f"Malformed option (expected key=value): {item!r}")
            key, raw = item.split("=", 1)
            parsed[key.strip()] = _coerce_option(raw.strip())
        return parsed


def _coerce_option(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw
