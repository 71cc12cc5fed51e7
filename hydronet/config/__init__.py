"""Конфиги решателей hydronet."""

from __future__ import annotations

from .solver import DEFAULT_SOLVER_CONFIG, SolverConfig

__all__ = [
    "SolverConfig",
    "DEFAULT_SOLVER_CONFIG",
]
