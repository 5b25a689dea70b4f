"""Tests for the oracle registry."""

from unittest.mock import patch

import pytest

from smt_enumerate import oracles
from smt_enumerate.oracles import (
    KNOWN_ORACLES,
    available_oracles,
    get_oracle,
    oracle_names,
    register_oracle,
)

from conftest import FakeOracle


@pytest.fixture(autouse=True)
def restore_registry():
    saved = dict(oracles._ORACLES)
    yield
    oracles._ORACLES.clear()
    oracles._ORACLES.update(saved)


def test_get_z3():
    """z3 resolves to Z3Oracle."""
    pytest.importorskip("z3")
    assert get_oracle("Z3").__name__ == "Z3Oracle"


def test_get_ortools():
    """ortools resolves to ORToolsOracle."""
    pytest.importorskip("ortools")
    assert get_oracle("ortools").__name__ == "ORToolsOracle"


def test_unknown_returns_none():
    """Unknown names resolve to None."""
    assert get_oracle("cvc5") is None


def test_register_custom():
    """Registered oracles are returned by name."""
    register_oracle("Fake", FakeOracle)
    assert get_oracle("fake") is FakeOracle
    assert "fake" in available_oracles()


def test_available_lists_importable():
    """available_oracles only lists loadable backends."""
    pytest.importorskip("z3")
    assert "z3" in available_oracles()


def test_missing_engine_returns_none():
    """A built-in whose engine cannot be imported resolves to None."""
    oracles._ORACLES.pop("ortools", None)
    with patch("smt_enumerate.oracles.importlib.import_module",
               side_effect=ImportError("no ortools")):
        assert get_oracle("ortools") is None
    assert "ortools" not in available_oracles()


def test_lookup_is_cached():
    """Each built-in is imported at most once."""
    oracles._ORACLES.pop("z3", None)
    with patch("smt_enumerate.oracles.importlib.import_module",
               side_effect=ImportError("no z3")) as mock_import:
        get_oracle("z3")
        get_oracle("Z3")
    assert mock_import.call_count == 1


def test_oracle_names_include_registered():
    """oracle_names lists built-ins and registered names."""
    register_oracle("fake", FakeOracle)
    assert oracle_names() == sorted(["fake", *KNOWN_ORACLES])
