"""Свойства рабочей жидкости.

Для гидравлики сети нужны только плотность и динамическая вязкость.
Корреляции Dowtherm A (Therminol) справедливы в диапазоне 20..180 °C.
"""

from __future__ import annotations

from dataclasses import dataclass

from hydronet.core.validation import ensure_in_range, ensure_positive


DOWTHERM_A_MIN_TEMPERATURE_C: float = 20.0
DOWTHERM_A_MAX_TEMPERATURE_C: float = 180.0


@dataclass(frozen=True, slots=True)
class FluidProperties:
    """Свойства жидкости в рабочей точке (изотермически)."""

    density_kg_m3: float
    viscosity_Pa_s: float
    name: str = "fluid"

    def __post_init__(self) -> None:
        ensure_positive(self.density_kg_m3, "density_kg_m3")
        ensure_positive(self.viscosity_Pa_s, "viscosity_Pa_s")


def _check_dowtherm_range(temperature_C: float) -> None:
    ensure_in_range(
        temperature_C,
        DOWTHERM_A_MIN_TEMPERATURE_C,
        DOWTHERM_A_MAX_TEMPERATURE_C,
        "temperature_C",
    )


def dowtherm_a_density(temperature_C: float) -> float:
    _check_dowtherm_range(temperature_C)
    return float(1078.0 - 0.85 * temperature_C)


def dowtherm_a_viscosity(temperature_C: float) -> float:
    _check_dowtherm_range(temperature_C)
    return float(0.130 / temperature_C**1.072)


def dowtherm_a(temperature_C: float) -> FluidProperties:
    return FluidProperties(
        density_kg_m3=dowtherm_a_density(temperature_C),
        viscosity_Pa_s=dowtherm_a_viscosity(temperature_C),
        name=f"dowtherm_a@{temperature_C:g}C",
    )
