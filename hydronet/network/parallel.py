"""Параллельная коллекция компонентов."""

from __future__ import annotations

from hydronet.network.base import MemberCollection
from hydronet.solvers.parallel import (
    parallel_mass_flowrate_from_pressure_change,
    parallel_pressure_change_from_mass_flowrate,
)


class ParallelCollection(MemberCollection):
    """Components sharing one pressure change; mass flowrates add up."""

    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float:
        return parallel_pressure_change_from_mass_flowrate(
            mass_flowrate_kg_s,
            self.members,
            config=self.config,
            xtol=self.config.collection_xtol,
        )

    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float:
        return parallel_mass_flowrate_from_pressure_change(pressure_change_Pa, self.members)
