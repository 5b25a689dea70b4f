"""
Status enums for smt-enumerate.

``Status`` is the verdict returned by an oracle's satisfiability check.
``EnumerationState`` is the state of the interactive enumeration loop.
"""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Result of an oracle satisfiability check."""

    SATISFIABLE = "SATISFIABLE"
    UNSATISFIABLE = "UNSATISFIABLE"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value

    @property
    def is_sat(self) -> bool:
        return self is Status.SATISFIABLE


class EnumerationState(str, Enum):
    """
    States of the enumeration loop.

    AWAITING_QUERY -> DONE_UNSAT      oracle is not satisfiable
    AWAITING_QUERY -> AWAITING_INPUT  solution shown and excluded
    AWAITING_INPUT -> AWAITING_QUERY  user pressed space
    AWAITING_INPUT -> DONE_USER_STOP  any other key or end of input
    """

    AWAITING_QUERY = "awaiting_query"
    AWAITING_INPUT = "awaiting_input"
    DONE_UNSAT = "done_unsat"
    DONE_USER_STOP = "done_user_stop"

    @property
    def terminal(self) -> bool:
        return self in (EnumerationState.DONE_UNSAT, EnumerationState.DONE_USER_STOP)
