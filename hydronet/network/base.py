"""Базовые классы коллекций.

`CollectionMethods` задаёт контракт: два абстрактных запроса и производные
от них потери давления относительно нулевого расхода.

`MemberCollection` хранит кортеж элементов. Кортеж заменяется целиком,
CRUD-операции строят новый кортеж и передают его в `set_members`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Tuple

from hydronet.config.solver import DEFAULT_SOLVER_CONFIG, SolverConfig
from hydronet.core.types import FlowElement


class CollectionMethods(ABC):
    @abstractmethod
    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float:
        raise NotImplementedError

    def get_pressure_loss(self, mass_flowrate_kg_s: float) -> float:
        """Loss relative to the zero-flow baseline: −(ΔP(m) − ΔP(0))."""

        baseline = self.get_pressure_change(0.0)
        return float(-(self.get_pressure_change(mass_flowrate_kg_s) - baseline))

    def get_mass_flowrate_from_pressure_loss(self, pressure_loss_Pa: float) -> float:
        baseline = self.get_pressure_change(0.0)
        return self.get_mass_flowrate_from_pressure_change(-pressure_loss_Pa + baseline)


class MemberCollection(CollectionMethods):
    """Collection that owns an ordered tuple of flow elements."""

    def __init__(
        self,
        members: Iterable[FlowElement] = (),
        *,
        config: SolverConfig = DEFAULT_SOLVER_CONFIG,
        name: str = "",
    ) -> None:
        self.config = config
        self.name = name or type(self).__name__
        self._members: Tuple[FlowElement, ...] = ()
        self.set_members(members)

    @property
    def members(self) -> Tuple[FlowElement, ...]:
        return self._members

    def set_members(self, members: Iterable[FlowElement]) -> None:
        new_members = tuple(members)
        for i, m in enumerate(new_members):
            if not isinstance(m, FlowElement):
                raise TypeError(f"member {i} of {self.name} does not implement FlowElement: {m!r}")
        self._members = new_members

    def add_member(self, member: FlowElement) -> None:
        self.set_members(self._members + (member,))

    def get_member(self, index: int) -> FlowElement:
        return self._members[index]

    def remove_member(self, index: int) -> FlowElement:
        removed = self._members[index]
        members = list(self._members)
        del members[index]
        self.set_members(members)
        return removed

    def update_member(self, index: int, member: FlowElement) -> None:
        members = list(self._members)
        members[index] = member
        self.set_members(members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[FlowElement]:
        return iter(self._members)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, members={len(self._members)})"
