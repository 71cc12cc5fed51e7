"""Parallel arrangement: common pressure change, flows add up.

The forward direction (flow from pressure) is a closed-form sum. The inverse
(pressure from a net flow) is a root search over the common pressure change.
Its bracket comes from a guessed per-branch flow, chosen by comparing two
pressure scales:

- internal: spread of branch pressure changes at zero flow (elevation,
  pumps), which drives circulation between branches;
- external: average branch loss if the whole net flow went through it.

All helpers here are pure and work for components and collections alike.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple
import logging

import numpy as np
from numpy.typing import NDArray

from hydronet.config.solver import DEFAULT_SOLVER_CONFIG, SolverConfig
from hydronet.core.types import FlowElement, FlowRegime
from hydronet.solvers.root_finding import Bracket, find_root_with_escalation

logger = logging.getLogger(__name__)

Vector = NDArray[np.float64]


def _require_members(members: Sequence[FlowElement]) -> None:
    if len(members) == 0:
        raise ValueError("parallel arrangement requires at least one member")


# =============================================================================
# Векторы оценок и их агрегаты
# =============================================================================
def pressure_estimate_vector(mass_flowrate_kg_s: float, members: Sequence[FlowElement]) -> Vector:
    """Pressure change of every branch when each carries the same flow."""

    return np.asarray([m.get_pressure_change(mass_flowrate_kg_s) for m in members], dtype=np.float64)


def pressure_loss_estimate_vector(mass_flowrate_kg_s: float, members: Sequence[FlowElement]) -> Vector:
    return np.asarray([m.get_pressure_loss(mass_flowrate_kg_s) for m in members], dtype=np.float64)


def maximum_pressure(values: Vector) -> float:
    return float(np.max(values))


def minimum_pressure(values: Vector) -> float:
    return float(np.min(values))


def average_pressure(values: Vector) -> float:
    return float(np.mean(values))


# =============================================================================
# Классификация режима и начальное приближение
# =============================================================================
def classify_flow_regime(
    mass_flowrate_kg_s: float,
    members: Sequence[FlowElement],
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> FlowRegime:
    _require_members(members)
    if abs(mass_flowrate_kg_s) < config.zero_flow_tolerance_kg_s:
        return "zero_flow"

    zero_flow_pressures = pressure_estimate_vector(0.0, members)
    internal = maximum_pressure(zero_flow_pressures) - minimum_pressure(zero_flow_pressures)
    external = average_pressure(pressure_loss_estimate_vector(mass_flowrate_kg_s, members))

    factor = config.internal_dominance_factor
    if internal * factor > abs(external):
        regime: FlowRegime = "internal_circulation"
    elif internal * factor < abs(external):
        regime = "external_flow"
    elif internal > 0.0 and abs(internal - external) / abs(internal) * 100.0 < config.comparable_deviation_pct:
        regime = "comparable"
    else:
        regime = "fallback"

    logger.debug("parallel regime=%s internal=%.6g Pa external=%.6g Pa", regime, internal, external)
    return regime


def guess_branch_mass_flowrate(
    mass_flowrate_kg_s: float,
    members: Sequence[FlowElement],
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> Tuple[float, FlowRegime]:
    """Per-branch flow used to seed the pressure bracket."""

    regime = classify_flow_regime(mass_flowrate_kg_s, members, config)
    if regime in ("external_flow", "fallback"):
        return float(mass_flowrate_kg_s / len(members)), regime
    return 0.0, regime


# =============================================================================
# Прямая и обратная задачи
# =============================================================================
def parallel_mass_flowrate_from_pressure_change(pressure_change_Pa: float, members: Sequence[FlowElement]) -> float:
    _require_members(members)
    return float(sum(m.get_mass_flowrate_from_pressure_change(pressure_change_Pa) for m in members))


def pressure_brackets(center_Pa: float, spread_Pa: float, config: SolverConfig) -> Iterator[Bracket]:
    """center ± spread, then the half-width grown geometrically."""

    half = spread_Pa if spread_Pa > 0.0 else config.bracket_padding_Pa
    for k in range(config.max_bracket_expansions + 1):
        h = half * config.bracket_growth**k
        yield (center_Pa - h, center_Pa + h)


def pressure_change_from_guessed_branch_flow(
    branch_mass_flowrate_kg_s: float,
    mass_flowrate_kg_s: float,
    members: Sequence[FlowElement],
    *,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
    xtol: float | None = None,
) -> float:
    _require_members(members)
    estimates = pressure_estimate_vector(branch_mass_flowrate_kg_s, members)
    center = average_pressure(estimates)
    spread = maximum_pressure(estimates) - minimum_pressure(estimates)

    def residual(pressure_change_Pa: float) -> float:
        return parallel_mass_flowrate_from_pressure_change(pressure_change_Pa, members) - mass_flowrate_kg_s

    if residual(center) == 0.0:
        return center

    return find_root_with_escalation(
        residual,
        pressure_brackets(center, spread, config),
        xtol=config.collection_xtol if xtol is None else xtol,
        max_iterations=config.max_iterations,
    )


def parallel_pressure_change_from_mass_flowrate(
    mass_flowrate_kg_s: float,
    members: Sequence[FlowElement],
    *,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
    xtol: float | None = None,
) -> float:
    branch_guess, _ = guess_branch_mass_flowrate(mass_flowrate_kg_s, members, config)
    return pressure_change_from_guessed_branch_flow(
        branch_guess,
        mass_flowrate_kg_s,
        members,
        config=config,
        xtol=xtol,
    )
