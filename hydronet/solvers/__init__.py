"""Численные решатели: поиск корня, последовательные и параллельные ветви."""

from __future__ import annotations

from .root_finding import find_root_brent, find_root_with_escalation

__all__ = [
    "find_root_brent",
    "find_root_with_escalation",
]
