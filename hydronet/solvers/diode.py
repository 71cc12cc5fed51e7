"""Распознавание элементов с диодной характеристикой (обратный клапан).

Если потери при малом прямом и обратном расходе различаются больше чем в
`diode_loss_ratio` раз (или одна из них не конечна), элемент считается
диодом. Тогда в запертом направлении расход равен нулю без поиска корня.
"""

from __future__ import annotations

from typing import Callable
import logging
import math
import sys

from hydronet.config.solver import DEFAULT_SOLVER_CONFIG, SolverConfig
from hydronet.core.errors import SolverError

logger = logging.getLogger(__name__)

PressureLossFn = Callable[[float], float]


def _is_degenerate(value: float) -> bool:
    return math.isnan(value) or math.isinf(value) or abs(value) >= sys.float_info.max


def probe_pressure_loss(pressure_loss_of: PressureLossFn, mass_flowrate_kg_s: float) -> float:
    """Loss at a probe flow; a failed solve counts as an infinite loss."""

    try:
        return float(pressure_loss_of(mass_flowrate_kg_s))
    except SolverError as exc:
        logger.debug("diode probe at %.3g kg/s failed: %s", mass_flowrate_kg_s, exc)
        return math.inf


def has_diode_behaviour(pressure_loss_of: PressureLossFn, config: SolverConfig = DEFAULT_SOLVER_CONFIG) -> bool:
    q = config.diode_probe_flow_kg_s
    forward = probe_pressure_loss(pressure_loss_of, q)
    backward = probe_pressure_loss(pressure_loss_of, -q)
    if _is_degenerate(forward) or _is_degenerate(backward):
        return True

    high = max(abs(forward), abs(backward))
    low = min(abs(forward), abs(backward))
    return high > config.diode_loss_ratio * low


def is_forward_biased(pressure_loss_of: PressureLossFn, config: SolverConfig = DEFAULT_SOLVER_CONFIG) -> bool:
    """True when flow passes forward and is blocked in reverse."""

    q = config.diode_bias_probe_flow_kg_s
    forward = probe_pressure_loss(pressure_loss_of, q)
    backward = probe_pressure_loss(pressure_loss_of, -q)
    if _is_degenerate(backward):
        return True
    if _is_degenerate(forward):
        return False
    return abs(backward) > config.diode_loss_ratio * abs(forward)


def is_blocked(
    pressure_loss_Pa: float,
    pressure_loss_of: PressureLossFn,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> bool:
    """Whether a requested loss pushes flow in the blocked direction."""

    if not has_diode_behaviour(pressure_loss_of, config):
        return False

    forward_biased = is_forward_biased(pressure_loss_of, config)
    reverse_flow = pressure_loss_Pa < 0.0
    blocked = forward_biased == reverse_flow
    if blocked:
        logger.debug(
            "diode short-circuit: %s-biased element, requested loss %.6g Pa",
            "forward" if forward_biased else "reverse",
            pressure_loss_Pa,
        )
    return blocked
