"""Последовательное соединение: общий расход, перепады складываются.

Обратная задача (расход по перепаду) решается поиском корня по расходу
с мёртвой зоной около нуля и расширяющимися интервалами.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple
import logging

from hydronet.config.solver import DEFAULT_SOLVER_CONFIG, SolverConfig
from hydronet.core.types import FlowElement
from hydronet.solvers.root_finding import find_root_with_escalation

logger = logging.getLogger(__name__)

PressureChangeFn = Callable[[float], float]


def _require_members(members: Sequence[FlowElement]) -> None:
    if len(members) == 0:
        raise ValueError("series arrangement requires at least one member")


def series_pressure_change(mass_flowrate_kg_s: float, members: Sequence[FlowElement]) -> float:
    _require_members(members)
    return float(sum(m.get_pressure_change(mass_flowrate_kg_s) for m in members))


def series_flow_brackets(forward_flow: bool, config: SolverConfig) -> List[Tuple[float, float]]:
    """[0, ±first], then symmetric [-b, b] for every wider bound."""

    first, *wider = config.series_flow_brackets_kg_s
    brackets = [(0.0, first) if forward_flow else (-first, 0.0)]
    brackets.extend((-b, b) for b in wider)
    return brackets


def mass_flowrate_from_pressure_change_in_series(
    pressure_change_Pa: float,
    pressure_change_of: PressureChangeFn,
    *,
    config: SolverConfig,
    xtol: float,
) -> float:
    """Shared series inversion for components and collections.

    Returns exactly 0.0 when the applied pressure differs from the zero-flow
    baseline by less than the dead band.
    """

    baseline = pressure_change_of(0.0)
    pressure_loss = -(pressure_change_Pa - baseline)
    if abs(pressure_loss) < config.dead_band_Pa:
        logger.debug("series dead band: |loss|=%.3g Pa < %.3g Pa", abs(pressure_loss), config.dead_band_Pa)
        return 0.0

    forward_flow = pressure_loss > 0.0

    def residual(mass_flowrate_kg_s: float) -> float:
        return pressure_change_Pa - pressure_change_of(mass_flowrate_kg_s)

    return find_root_with_escalation(
        residual,
        series_flow_brackets(forward_flow, config),
        xtol=xtol,
        max_iterations=config.max_iterations,
    )


def series_mass_flowrate_from_pressure_change(
    pressure_change_Pa: float,
    members: Sequence[FlowElement],
    *,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
    xtol: float | None = None,
) -> float:
    _require_members(members)
    return mass_flowrate_from_pressure_change_in_series(
        pressure_change_Pa,
        lambda q: series_pressure_change(q, members),
        config=config,
        xtol=config.component_xtol if xtol is None else xtol,
    )
