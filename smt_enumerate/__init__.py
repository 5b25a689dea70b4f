"""
smt-enumerate: interactive enumeration of distinct solutions.

An oracle (Z3 by default, OR-Tools CP-SAT optionally) is loaded with
integer constraints. The enumerator then shows one solution at a time and
excludes each one before asking for the next.

Example usage:
    from smt_enumerate import SolutionEnumerator, get_oracle

    with get_oracle("z3")() as oracle:
        x, y = oracle.int_vars(["x", "y"])
        oracle.add(oracle.gt(x, 2), oracle.lt(y, 10), oracle.eq(x + 2 * y, 7))
        SolutionEnumerator(oracle, [x, y]).run()
"""

from smt_enumerate.enumerator import (
    EnumerationResult,
    SolutionEnumerator,
    exclude_solution,
    find_solution,
    iter_solutions,
    next_solution,
)
from smt_enumerate.oracles import available_oracles, get_oracle, register_oracle
from smt_enumerate.solution import Solution
from smt_enumerate.solver import enumerate_solutions, supported_solvers
from smt_enumerate.status import EnumerationState, Status
from smt_enumerate.strategies import GridStrategy, SolutionStrategy, VectorStrategy

__version__ = "0.1.0"
__all__ = [
    "enumerate_solutions",
    "supported_solvers",
    "get_oracle",
    "available_oracles",
    "register_oracle",
    "SolutionEnumerator",
    "EnumerationResult",
    "iter_solutions",
    "next_solution",
    "find_solution",
    "exclude_solution",
    "Solution",
    "Status",
    "EnumerationState",
    "SolutionStrategy",
    "VectorStrategy",
    "GridStrategy",
]
