"""Core utilities: units, types, validation, errors."""

from __future__ import annotations

__all__ = [
    "units",
    "types",
    "validation",
    "errors",
]
