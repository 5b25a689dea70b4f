"""
Oracle backends for smt-enumerate.

Each oracle is a BaseOracle subclass wrapping one external
satisfiability engine. Built-in oracles are imported on first lookup, so a
missing engine only matters when it is asked for.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smt_enumerate.oracles.base import BaseOracle

# Built-in oracles as "module:Class" import paths
_BUILTIN: dict[str, str] = {
    "z3": "smt_enumerate.oracles.z3_oracle:Z3Oracle",
    "ortools": "smt_enumerate.oracles.ortools_oracle:ORToolsOracle",
}

KNOWN_ORACLES = tuple(_BUILTIN)

# Resolved classes; None marks a built-in whose engine is not installed
_ORACLES: dict[str, type["BaseOracle"] | None] = {}


def register_oracle(name: str, oracle_class: type["BaseOracle"]) -> None:
    """Register an oracle class under ``name`` (case-insensitive)."""
    _ORACLES[name.lower()] = oracle_class


def get_oracle(name: str) -> type["BaseOracle"] | None:
    """
    Get an oracle class by name.

    Returns None for unknown names and for built-in oracles whose engine
    cannot be imported.
    """
    key = name.lower()
    if key not in _ORACLES and key in _BUILTIN:
        _ORACLES[key] = _load(_BUILTIN[key])
    return _ORACLES.get(key)


def _load(path: str) -> type["BaseOracle"] | None:
    module_name, _, class_name = path.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return None
    return getattr(module, class_name)


def oracle_names() -> list[str]:
    """Names accepted by get_oracle: the built-ins plus anything registered."""
    return sorted(set(KNOWN_ORACLES) | set(_ORACLES))


def available_oracles() -> list[str]:
    """Names of oracles that resolve to a class in this environment."""
    return [name for name in oracle_names() if get_oracle(name) is not None]


__all__ = [
    "get_oracle",
    "register_oracle",
    "available_oracles",
    "oracle_names",
    "KNOWN_ORACLES",
]
