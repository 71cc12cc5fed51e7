"""Super-collections: collections of collections.

`ParallelSuperCollection` (alias `SuperCollection`) joins branches that are
themselves series/parallel collections and reuses the parallel solver at
collection level. `SeriesSuperCollection` joins collections end to end.

Before inverting pressure to flow both apply two short-circuits:

1. dead band: a loss below `dead_band_Pa` relative to the zero-flow
   baseline gives exactly zero flow;
2. check-valve: if the collection behaves like a diode and the requested
   loss pushes flow in its blocked direction, the flow is zero.
"""

from __future__ import annotations

import logging

from hydronet.network.base import MemberCollection
from hydronet.solvers.diode import PressureLossFn, is_blocked
from hydronet.solvers.parallel import (
    parallel_mass_flowrate_from_pressure_change,
    parallel_pressure_change_from_mass_flowrate,
)
from hydronet.solvers.series import mass_flowrate_from_pressure_change_in_series, series_pressure_change

logger = logging.getLogger(__name__)


class _SuperCollection(MemberCollection):
    def _loss_relative_to(self, baseline_Pa: float) -> PressureLossFn:
        def pressure_loss_of(mass_flowrate_kg_s: float) -> float:
            return float(-(self.get_pressure_change(mass_flowrate_kg_s) - baseline_Pa))

        return pressure_loss_of

    def _short_circuit(self, pressure_change_Pa: float, baseline_Pa: float) -> bool:
        pressure_loss = -(pressure_change_Pa - baseline_Pa)
        if abs(pressure_loss) < self.config.dead_band_Pa:
            logger.debug("%s: dead band, |loss|=%.3g Pa", self.name, abs(pressure_loss))
            return True
        return is_blocked(pressure_loss, self._loss_relative_to(baseline_Pa), self.config)


class ParallelSuperCollection(_SuperCollection):
    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float:
        return parallel_pressure_change_from_mass_flowrate(
            mass_flowrate_kg_s,
            self.members,
            config=self.config,
            xtol=self.config.collection_xtol,
        )

    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float:
        baseline = self.get_pressure_change(0.0)
        if self._short_circuit(pressure_change_Pa, baseline):
            return 0.0
        return parallel_mass_flowrate_from_pressure_change(pressure_change_Pa, self.members)


class SeriesSuperCollection(_SuperCollection):
    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float:
        return series_pressure_change(mass_flowrate_kg_s, self.members)

    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float:
        baseline = self.get_pressure_change(0.0)
        if self._short_circuit(pressure_change_Pa, baseline):
            return 0.0
        return mass_flowrate_from_pressure_change_in_series(
            pressure_change_Pa,
            self.get_pressure_change,
            config=self.config,
            xtol=self.config.collection_xtol,
        )


SuperCollection = ParallelSuperCollection
