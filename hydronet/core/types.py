"""hydronet.core.types

Общие типы: протокол гидравлического элемента и метки режимов течения.
"""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable


FlowRegime = Literal[
    "zero_flow",
    "internal_circulation",
    "external_flow",
    "comparable",
    "fallback",
]


@runtime_checkable
class FlowElement(Protocol):
    """Anything with a single-valued pressure-flow relationship.

    Components and collections both satisfy it, so a lone component behaves
    like a collection of one. All four queries are pure.

    Sign convention: pressure_change = -pressure_loss + pressure_change(0).
    """

    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float: ...

    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float: ...

    def get_pressure_loss(self, mass_flowrate_kg_s: float) -> float: ...

    def get_mass_flowrate_from_pressure_loss(self, pressure_loss_Pa: float) -> float: ...
