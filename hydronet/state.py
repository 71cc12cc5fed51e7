"""Зафиксированное рабочее состояние элементов.

Все запросы к элементам чистые. Состояние меняется только явным вызовом
`commit_*` после решения; решатели его никогда не вызывают.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hydronet.core.types import FlowElement


@dataclass
class FlowState:
    # кг/с
    mass_flowrate_kg_s: float = 0.0
    # Па
    pressure_change_Pa: float = 0.0
    pressure_loss_Pa: float = 0.0

    def copy(self) -> "FlowState":
        return FlowState(**self.__dict__)


class StatefulElement:
    """Wraps a flow element and remembers the last committed operating point."""

    def __init__(self, element: FlowElement) -> None:
        self.element = element
        self.state = FlowState()

    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float:
        return self.element.get_pressure_change(mass_flowrate_kg_s)

    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float:
        return self.element.get_mass_flowrate_from_pressure_change(pressure_change_Pa)

    def get_pressure_loss(self, mass_flowrate_kg_s: float) -> float:
        return self.element.get_pressure_loss(mass_flowrate_kg_s)

    def get_mass_flowrate_from_pressure_loss(self, pressure_loss_Pa: float) -> float:
        return self.element.get_mass_flowrate_from_pressure_loss(pressure_loss_Pa)

    def commit_mass_flowrate(self, mass_flowrate_kg_s: float) -> FlowState:
        self.state = FlowState(
            mass_flowrate_kg_s=float(mass_flowrate_kg_s),
            pressure_change_Pa=self.get_pressure_change(mass_flowrate_kg_s),
            pressure_loss_Pa=self.get_pressure_loss(mass_flowrate_kg_s),
        )
        return self.state.copy()

    def commit_pressure_change(self, pressure_change_Pa: float) -> FlowState:
        mass_flowrate = self.get_mass_flowrate_from_pressure_change(pressure_change_Pa)
        self.state = FlowState(
            mass_flowrate_kg_s=float(mass_flowrate),
            pressure_change_Pa=float(pressure_change_Pa),
            pressure_loss_Pa=self.get_pressure_loss(mass_flowrate),
        )
        return self.state.copy()


def commit_series(members: Iterable[FlowElement], mass_flowrate_kg_s: float) -> int:
    """Commit a solved series flow to every stateful member; returns how many."""

    n = 0
    for m in members:
        if isinstance(m, StatefulElement):
            m.commit_mass_flowrate(mass_flowrate_kg_s)
            n += 1
    return n


def commit_parallel(members: Iterable[FlowElement], pressure_change_Pa: float) -> int:
    n = 0
    for m in members:
        if isinstance(m, StatefulElement):
            m.commit_pressure_change(pressure_change_Pa)
            n += 1
    return n
