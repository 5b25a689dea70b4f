"""
Pytest configuration for smt-enumerate tests.

Provides a pure-Python oracle over a fixed candidate list, so the
enumeration loop can be tested without a native solver, and a scripted
key reader standing in for the interactive prompt.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable

import pytest

from smt_enumerate.oracles.base import BaseOracle
from smt_enumerate.status import Status


def _value(term: Any, env: dict[str, int]) -> Any:
    """Resolve a variable name against ``env``; constants pass through."""
    if isinstance(term, str):
        return env[term]
    return term


class FakeOracle(BaseOracle):
    """
    Oracle whose search space is an explicit list of assignments.

    Variables are their names. Constraints are predicates over an
    assignment dict. check() returns the first candidate satisfying every
    assertion, so results are deterministic.
    """

    name = "fake"

    def __init__(self, candidates: list[dict[str, int]], *, unknown: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.candidates = list(candidates)
        self.unknown = unknown
        self.check_calls = 0
        self._model: dict[str, int] | None = None
        self.close_calls = 0

    def int_var(self, name: str, lb: int | None = None, ub: int | None = None) -> Any:
        self._ensure_open()
        self.vars[name] = name
        if lb is not None:
            self.add(self.ge(name, lb))
        if ub is not None:
            self.add(self.le(name, ub))
        return name

    def eq(self, a, b):
        return lambda env: _value(a, env) == _value(b, env)

    def ne(self, a, b):
        return lambda env: _value(a, env) != _value(b, env)

    def lt(self, a, b):
        return lambda env: _value(a, env) < _value(b, env)

    def le(self, a, b):
        return lambda env: _value(a, env) <= _value(b, env)

    def gt(self, a, b):
        return lambda env: _value(a, env) > _value(b, env)

    def ge(self, a, b):
        return lambda env: _value(a, env) >= _value(b, env)

    def not_(self, a):
        return lambda env: not a(env)

    def and_(self, args):
        return lambda env: all(c(env) for c in args)

    def or_(self, args):
        return lambda env: any(c(env) for c in args)

    def distinct(self, args):
        return lambda env: len({_value(a, env) for a in args}) == len(args)

    def _assert(self, constraint: Any) -> None:
        pass

    def check(self) -> Status:
        self._ensure_open()
        self.check_calls += 1
        if self.unknown:
            self._status = Status.UNKNOWN
            return self._status
        for env in self.candidates:
            if all(c(env) for c in self._assertions):
                self._model = env
                self._status = Status.SATISFIABLE
                return self._status
        self._model = None
        self._status = Status.UNSATISFIABLE
        return self._status

    def model(self) -> Any:
        self._ensure_open()
        self._ensure_sat()
        return self._model

    def evaluate(self, model: Any, var: Any) -> int:
        return model[var]

    def close(self) -> None:
        self.close_calls += 1
        self._closed = True


def grid_candidates(names: list[str], values: range) -> list[dict[str, int]]:
    """Every assignment of ``values`` to ``names``."""
    return [
        dict(zip(names, combo))
        for combo in itertools.product(values, repeat=len(names))
    ]


@pytest.fixture
def make_fake_oracle() -> Callable[..., FakeOracle]:
    """Factory for FakeOracle instances."""
    return FakeOracle


@pytest.fixture
def scripted_keys() -> Callable[[str], Callable[[], str]]:
    """
    Build a key reader that replays ``keys`` one character at a time and
    then reports end of input.
    """

    def factory(keys: str) -> Callable[[], str]:
        it = iter(keys)

        def read_key() -> str:
            read_key.calls += 1
            return next(it, "")

        read_key.calls = 0
        return read_key

    return factory


@pytest.fixture
def z3_oracle():
    """A Z3 oracle closed after the test."""
    from smt_enumerate.oracles.z3_oracle import Z3Oracle

    oracle = Z3Oracle()
    yield oracle
    oracle.close()
