"""Настройки численных решателей сети.

Этот модуль намеренно является data-only конфигом. Все пороги здесь
эвристические, а не физические законы: их можно переопределить, передав
свой `SolverConfig` в коллекцию.

Значения по умолчанию:
- мёртвая зона 9 Па (разрешение водяного манометра);
- порог "нулевого" расхода 1e-9 кг/с;
- доминирование внутренней циркуляции при отношении масштабов 10;
- "сравнимые" масштабы при отклонении < 80 %;
- диод/обратный клапан при отношении потерь > 1000;
- интервалы поиска расхода 10, 1e4, 2e7 кг/с;
- точность 1e-15 (компоненты) и 1e-9 (коллекции), до 30 итераций.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import math

from hydronet.core.units import MANOMETER_RESOLUTION, PASCAL


def _check_positive(name: str, value: float) -> None:
    if not (math.isfinite(float(value)) and value > 0.0):
        raise ValueError(f"{name} must be > 0")


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """Эвристики выбора интервалов и короткие замыкания решателей."""

    dead_band_Pa: float = MANOMETER_RESOLUTION
    zero_flow_tolerance_kg_s: float = 1e-9

    internal_dominance_factor: float = 10.0
    comparable_deviation_pct: float = 80.0

    diode_loss_ratio: float = 1000.0
    diode_probe_flow_kg_s: float = 0.01
    diode_bias_probe_flow_kg_s: float = 0.1

    bracket_padding_Pa: float = 5.0 * PASCAL
    series_flow_brackets_kg_s: Tuple[float, ...] = (10.0, 10_000.0, 20_000_000.0)

    component_xtol: float = 1e-15
    collection_xtol: float = 1e-9
    max_iterations: int = 30

    bracket_growth: float = 10.0
    max_bracket_expansions: int = 6

    def __post_init__(self) -> None:
        if self.dead_band_Pa < 0.0:
            raise ValueError("dead_band_Pa must be >= 0")
        if self.zero_flow_tolerance_kg_s < 0.0:
            raise ValueError("zero_flow_tolerance_kg_s must be >= 0")
        _check_positive("internal_dominance_factor", self.internal_dominance_factor)
        _check_positive("comparable_deviation_pct", self.comparable_deviation_pct)
        if self.diode_loss_ratio <= 1.0:
            raise ValueError("diode_loss_ratio must be > 1")
        _check_positive("diode_probe_flow_kg_s", self.diode_probe_flow_kg_s)
        _check_positive("diode_bias_probe_flow_kg_s", self.diode_bias_probe_flow_kg_s)
        _check_positive("bracket_padding_Pa", self.bracket_padding_Pa)

        if len(self.series_flow_brackets_kg_s) == 0:
            raise ValueError("series_flow_brackets_kg_s must not be empty")
        for b in self.series_flow_brackets_kg_s:
            _check_positive("series_flow_brackets_kg_s item", b)

        _check_positive("component_xtol", self.component_xtol)
        _check_positive("collection_xtol", self.collection_xtol)
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")

        if self.bracket_growth <= 1.0:
            raise ValueError("bracket_growth must be > 1")
        if self.max_bracket_expansions < 0:
            raise ValueError("max_bracket_expansions must be >= 0")


DEFAULT_SOLVER_CONFIG = SolverConfig()
