"""
Solution enumeration over an oracle.

The enumerator repeats one protocol against an oracle that already holds
the problem constraints:

1. check satisfiability; stop on anything but SATISFIABLE
2. evaluate the model into a solution over the tracked variables
3. present the solution
4. assert a clause excluding exactly that solution
5. ask the user whether to continue

SolutionEnumerator runs it interactively as an explicit state machine.
iter_solutions() runs it without prompting, up to an optional limit.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator, Sequence, TextIO

from smt_enumerate.console import read_key as console_read_key
from smt_enumerate.solution import Solution
from smt_enumerate.status import EnumerationState, Status
from smt_enumerate.strategies import SolutionStrategy, VectorStrategy

if TYPE_CHECKING:
    from smt_enumerate.oracles.base import BaseOracle

PROMPT = "Show next? [space]"
CONTINUE_KEY = " "


@dataclass
class EnumerationResult:
    """Outcome of an enumeration session."""

    state: EnumerationState
    status: Status
    count: int


def find_solution(
    oracle: "BaseOracle",
    variables: Sequence[Any],
    strategy: SolutionStrategy,
) -> Solution | None:
    """
    Check the oracle and evaluate its model, leaving the oracle unchanged.

    Returns None when the oracle is not satisfiable; ``oracle.status``
    then holds the reason.
    """
    if oracle.check() is not Status.SATISFIABLE:
        return None
    return strategy.evaluate(oracle, oracle.model(), variables)


def exclude_solution(
    oracle: "BaseOracle",
    variables: Sequence[Any],
    strategy: SolutionStrategy,
    solution: Solution,
) -> None:
    """Assert the clause that rules out ``solution``."""
    oracle.add(strategy.exclude(oracle, variables, solution))


def next_solution(
    oracle: "BaseOracle",
    variables: Sequence[Any],
    strategy: SolutionStrategy,
) -> Solution | None:
    """Fetch one solution and exclude it from the oracle."""
    solution = find_solution(oracle, variables, strategy)
    if solution is not None:
        exclude_solution(oracle, variables, strategy, solution)
    return solution


def check_limit(limit: int | None) -> None:
    """Reject solution limits below one."""
    if limit is not None and limit < 1:
        raise ValueError(f"Solution limit must be at least 1, got {limit}")


def iter_solutions(
    oracle: "BaseOracle",
    variables: Sequence[Any],
    strategy: SolutionStrategy | None = None,
    limit: int | None = None,
) -> Iterator[Solution]:
    """
    Yield distinct solutions until the oracle is exhausted or ``limit`` is hit.

    Each solution is yielded before its exclusion clause is asserted; the
    clause is added when the next solution is requested.
    """
    check_limit(limit)
    if strategy is None:
        strategy = VectorStrategy()

    found = 0
    while limit is None or found < limit:
        solution = find_solution(oracle, variables, strategy)
        if solution is None:
            return
        found += 1
        yield solution
        exclude_solution(oracle, variables, strategy, solution)


class SolutionEnumerator:
    """
    Interactive enumeration loop.

    Each call to step() performs one transition of the state machine in
    EnumerationState; run() steps until a terminal state is reached.

    Attributes:
        oracle: Oracle pre-loaded with the problem constraints
        variables: Tracked variables, in display and exclusion order
        strategy: Evaluates, excludes and presents solutions
        count: Number of solutions shown so far
    """

    def __init__(
        self,
        oracle: "BaseOracle",
        variables: Sequence[Any],
        strategy: SolutionStrategy | None = None,
        *,
        read_key: Callable[[], str] | None = None,
        stream: TextIO | None = None,
        verbose: int = 0,
    ):
        if not variables:
            raise ValueError("At least one tracked variable is required")

        self.oracle = oracle
        self.variables = list(variables)
        self.strategy = strategy if strategy is not None else VectorStrategy()
        self.read_key = read_key if read_key is not None else console_read_key
        self.stream = stream if stream is not None else sys.stdout
        self.verbose = verbose

        self.count = 0
        self._state = EnumerationState.AWAITING_QUERY

    @property
    def state(self) -> EnumerationState:
        return self._state

    def run(self) -> EnumerationResult:
        """Step until the oracle is exhausted or the user stops."""
        while not self._state.terminal:
            self.step()
        return EnumerationResult(
            state=self._state, status=self.oracle.status, count=self.count
        )

    def step(self) -> EnumerationState:
        """Perform exactly one transition and return the new state."""
        if self._state is EnumerationState.AWAITING_QUERY:
            self._state = self._query()
        elif self._state is EnumerationState.AWAITING_INPUT:
            self._state = self._await_input()
        else:
            raise RuntimeError(f"Enumeration already finished ({self._state.value})")
        self._log(1, f"State: {self._state.value}")
        return self._state

    def _query(self) -> EnumerationState:
        solution = find_solution(self.oracle, self.variables, self.strategy)
        if solution is None:
            print(self.oracle.status, file=self.stream, flush=True)
            return EnumerationState.DONE_UNSAT

        self.count += 1
        print(self.strategy.present(solution), file=self.stream, flush=True)
        exclude_solution(self.oracle, self.variables, self.strategy, solution)
        return EnumerationState.AWAITING_INPUT

    def _await_input(self) -> EnumerationState:
        self.stream.write(PROMPT + "\r")
        self.stream.flush()

        key = self.read_key()

        # Blank out the prompt line
        self.stream.write(" " * len(PROMPT) + "\r")
        self.stream.flush()

        if key == CONTINUE_KEY:
            return EnumerationState.AWAITING_QUERY
        return EnumerationState.DONE_USER_STOP

    def _log(self, level: int, msg: str) -> None:
        """Log message if verbosity is high enough."""
        if self.verbose >= level:
            print(msg)
