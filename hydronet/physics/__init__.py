"""Пакет физики: безразмерные числа, трение, свойства жидкости, компоненты."""

from __future__ import annotations

from .components import CheckValve, CustomComponent, FluidComponent, Pipe
from .fluids import FluidProperties, dowtherm_a

__all__ = [
    "FluidComponent",
    "Pipe",
    "CustomComponent",
    "CheckValve",
    "FluidProperties",
    "dowtherm_a",
]
