"""Tests for the OR-Tools CP-SAT oracle."""

import pytest

pytest.importorskip("ortools")

from smt_enumerate.enumerator import iter_solutions
from smt_enumerate.oracles.ortools_oracle import DEFAULT_BOUNDS, ORToolsOracle
from smt_enumerate.problems import distinct_grid, simple_constraints
from smt_enumerate.status import Status


@pytest.fixture
def oracle():
    oracle = ORToolsOracle()
    yield oracle
    oracle.close()


class TestBasicSatisfaction:
    """Tests for basic satisfaction problems."""

    def test_default_bounds(self, oracle):
        """Unbounded declarations fall back to default_bounds."""
        x = oracle.int_var("x")
        oracle.add(oracle.ge(x, DEFAULT_BOUNDS[1]))
        assert oracle.check() is Status.SATISFIABLE
        assert oracle.evaluate(oracle.model(), x) == DEFAULT_BOUNDS[1]

    def test_explicit_bounds(self, oracle):
        """Explicit bounds restrict the domain."""
        x = oracle.int_var("x", 3, 3)
        assert oracle.check() is Status.SATISFIABLE
        assert oracle.evaluate(oracle.model(), x) == 3

    def test_unsatisfiable(self, oracle):
        """Contradictory literals are infeasible."""
        x = oracle.int_var("x", 0, 5)
        oracle.add(oracle.gt(x, 3), oracle.lt(x, 2))
        assert oracle.check() is Status.UNSATISFIABLE

    def test_linear_expression_assertion(self, oracle):
        """Raw linear constraints can be asserted directly."""
        x, y = oracle.int_vars(["x", "y"], 0, 10)
        oracle.add(x + y == 10, x - y == 4)
        assert oracle.check() is Status.SATISFIABLE
        model = oracle.model()
        assert (oracle.evaluate(model, x), oracle.evaluate(model, y)) == (7, 3)

    def test_reified_composition(self, oracle):
        """Reified comparisons compose under not_/and_/or_."""
        x, y = oracle.int_vars(["x", "y"], 0, 1)
        oracle.add(
            oracle.distinct([x, y]),
            oracle.or_([oracle.eq(x, 1), oracle.eq(y, 5)]),
            oracle.not_(oracle.and_([oracle.eq(x, 0), oracle.le(y, 0)])),
        )
        assert oracle.check() is Status.SATISFIABLE
        model = oracle.model()
        assert (oracle.evaluate(model, x), oracle.evaluate(model, y)) == (1, 0)

    def test_invalid_default_bounds(self):
        """Inverted default bounds are rejected."""
        with pytest.raises(ValueError, match="Invalid default bounds"):
            ORToolsOracle(default_bounds=(5, 1))


class TestScenarios:
    """The built-in problems solved with CP-SAT."""

    def test_simple_constraints_finite_under_bounds(self):
        """Scenario A is finite under bounds and every pair is valid."""
        with ORToolsOracle(default_bounds=(-20, 20)) as oracle:
            instance = simple_constraints(oracle)
            sols = list(iter_solutions(oracle, instance.variables, instance.strategy))

            # x = 7 - 2y with 2 < x <= 20 gives y in [-6, 2]
            assert len(sols) == 9
            assert len(set(sols)) == 9
            for x, y in sols:
                assert x > 2 and y < 10 and x + 2 * y == 7
            assert oracle.status is Status.UNSATISFIABLE

    def test_grid_exhausts_after_all_permutations(self, oracle):
        """A 2x2 distinct grid over [1, 4] has exactly 4! solutions."""
        instance = distinct_grid(oracle, size=2)
        sols = list(iter_solutions(oracle, instance.variables, instance.strategy))
        assert len(sols) == 24
        assert len(set(sols)) == 24
        assert oracle.status is Status.UNSATISFIABLE


class TestConfiguration:
    """Test solver parameters."""

    def test_time_limit(self):
        """time_limit sets max_time_in_seconds."""
        with ORToolsOracle(time_limit=2.5) as oracle:
            assert oracle.solver.parameters.max_time_in_seconds == 2.5

    def test_options_set_parameters(self):
        """Options are applied to the solver parameters."""
        with ORToolsOracle(options="num_workers=1,random_seed=3") as oracle:
            assert oracle.solver.parameters.num_workers == 1
            assert oracle.solver.parameters.random_seed == 3

    def test_close(self):
        """close() drops the model and the solver."""
        oracle = ORToolsOracle()
        oracle.close()
        assert oracle.cpmodel is None
        assert oracle.solver is None
        with pytest.raises(RuntimeError, match="is closed"):
            oracle.check()
