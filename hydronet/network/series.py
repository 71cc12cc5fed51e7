"""Последовательная коллекция компонентов."""

from __future__ import annotations

from hydronet.network.base import MemberCollection
from hydronet.solvers.series import series_mass_flowrate_from_pressure_change, series_pressure_change


class SeriesCollection(MemberCollection):
    """Components sharing one mass flowrate; pressure changes add up."""

    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float:
        return series_pressure_change(mass_flowrate_kg_s, self.members)

    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float:
        return series_mass_flowrate_from_pressure_change(
            pressure_change_Pa,
            self.members,
            config=self.config,
            xtol=self.config.component_xtol,
        )
