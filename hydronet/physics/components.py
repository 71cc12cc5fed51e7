"""Эталонные гидравлические компоненты.

Каждый компонент предоставляет четыре чистых запроса (см. `FlowElement`):

    pressure_change = -pressure_loss + hydrostatic + internal_source

Компоненты неизменяемы (frozen dataclass), поэтому их можно разделять между
коллекциями и потоками.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math

from hydronet.core.units import DEG_TO_RAD, G
from hydronet.core.validation import ensure_finite, ensure_non_negative, ensure_positive
from hydronet.physics import dimensionless as dl
from hydronet.physics import friction
from hydronet.physics.fluids import FluidProperties


def hydrostatic_pressure_change(density_kg_m3: float, length_m: float, incline_angle_deg: float) -> float:
    """ΔP_hydro = ρ·(−g)·L·sin(θ); upward flow loses pressure."""

    return float(density_kg_m3 * (-G) * length_m * math.sin(incline_angle_deg * DEG_TO_RAD))


class FluidComponent(ABC):
    """Base for single components: subclasses provide the loss curve."""

    @abstractmethod
    def get_pressure_loss(self, mass_flowrate_kg_s: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def get_mass_flowrate_from_pressure_loss(self, pressure_loss_Pa: float) -> float:
        raise NotImplementedError

    def get_hydrostatic_pressure_change(self) -> float:
        return 0.0

    def get_internal_pressure_source(self) -> float:
        return 0.0

    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float:
        loss = self.get_pressure_loss(mass_flowrate_kg_s)
        return float(-loss + self.get_hydrostatic_pressure_change() + self.get_internal_pressure_source())

    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float:
        loss = -pressure_change_Pa + self.get_hydrostatic_pressure_change() + self.get_internal_pressure_source()
        return self.get_mass_flowrate_from_pressure_loss(loss)


@dataclass(frozen=True, slots=True)
class Pipe(FluidComponent):
    """Круглая труба: трение по Черчиллю + сосредоточенный коэффициент K."""

    fluid: FluidProperties
    hydraulic_diameter_m: float
    length_m: float
    absolute_roughness_m: float = 0.0
    form_loss_k: float = 0.0
    incline_angle_deg: float = 0.0
    internal_pressure_source_Pa: float = 0.0
    name: str = "pipe"

    def __post_init__(self) -> None:
        ensure_positive(self.hydraulic_diameter_m, "hydraulic_diameter_m")
        ensure_positive(self.length_m, "length_m")
        ensure_non_negative(self.absolute_roughness_m, "absolute_roughness_m")
        ensure_non_negative(self.form_loss_k, "form_loss_k")
        ensure_finite(self.incline_angle_deg, "incline_angle_deg")
        ensure_finite(self.internal_pressure_source_Pa, "internal_pressure_source_Pa")

    @property
    def cross_sectional_area_m2(self) -> float:
        d = float(self.hydraulic_diameter_m)
        return float(math.pi * d * d / 4.0)

    @property
    def roughness_ratio(self) -> float:
        return float(self.absolute_roughness_m / self.hydraulic_diameter_m)

    @property
    def length_to_diameter(self) -> float:
        return float(self.length_m / self.hydraulic_diameter_m)

    def get_hydrostatic_pressure_change(self) -> float:
        return hydrostatic_pressure_change(self.fluid.density_kg_m3, self.length_m, self.incline_angle_deg)

    def get_internal_pressure_source(self) -> float:
        return float(self.internal_pressure_source_Pa)

    def get_pressure_loss(self, mass_flowrate_kg_s: float) -> float:
        re = dl.reynolds_from_mass_flowrate(
            mass_flowrate_kg_s,
            self.cross_sectional_area_m2,
            self.hydraulic_diameter_m,
            self.fluid.viscosity_Pa_s,
        )
        be = friction.bejan_from_reynolds(re, self.roughness_ratio, self.length_to_diameter, self.form_loss_k)
        return dl.pressure_from_bejan(be, self.hydraulic_diameter_m, self.fluid.density_kg_m3, self.fluid.viscosity_Pa_s)

    def get_mass_flowrate_from_pressure_loss(self, pressure_loss_Pa: float) -> float:
        be = dl.bejan_from_pressure(
            pressure_loss_Pa,
            self.hydraulic_diameter_m,
            self.fluid.density_kg_m3,
            self.fluid.viscosity_Pa_s,
        )
        re = friction.reynolds_from_bejan(be, self.roughness_ratio, self.length_to_diameter, self.form_loss_k)
        return dl.mass_flowrate_from_reynolds(
            re,
            self.cross_sectional_area_m2,
            self.hydraulic_diameter_m,
            self.fluid.viscosity_Pa_s,
        )


@dataclass(frozen=True, slots=True)
class CustomComponent(FluidComponent):
    """Компонент с пользовательскими корреляциями f(Re, ε/D) и K(Re).

    Пример (гибкий шланг, ламинарный режим):
        darcy=lambda re, rr: 0.0, form_loss=lambda re: 400.0 + 52000.0 / re
    """

    fluid: FluidProperties
    hydraulic_diameter_m: float
    cross_sectional_area_m2: float
    length_m: float
    darcy: friction.DarcyCorrelation
    form_loss: friction.FormLossCorrelation
    absolute_roughness_m: float = 0.0
    incline_angle_deg: float = 0.0
    internal_pressure_source_Pa: float = 0.0
    name: str = "custom"

    def __post_init__(self) -> None:
        ensure_positive(self.hydraulic_diameter_m, "hydraulic_diameter_m")
        ensure_positive(self.cross_sectional_area_m2, "cross_sectional_area_m2")
        ensure_positive(self.length_m, "length_m")
        ensure_non_negative(self.absolute_roughness_m, "absolute_roughness_m")
        if not (callable(self.darcy) and callable(self.form_loss)):
            raise TypeError("darcy and form_loss must be callables")

    @property
    def roughness_ratio(self) -> float:
        return float(self.absolute_roughness_m / self.hydraulic_diameter_m)

    @property
    def length_to_diameter(self) -> float:
        return float(self.length_m / self.hydraulic_diameter_m)

    def get_hydrostatic_pressure_change(self) -> float:
        return hydrostatic_pressure_change(self.fluid.density_kg_m3, self.length_m, self.incline_angle_deg)

    def get_internal_pressure_source(self) -> float:
        return float(self.internal_pressure_source_Pa)

    def get_pressure_loss(self, mass_flowrate_kg_s: float) -> float:
        re = dl.reynolds_from_mass_flowrate(
            mass_flowrate_kg_s,
            self.cross_sectional_area_m2,
            self.hydraulic_diameter_m,
            self.fluid.viscosity_Pa_s,
        )
        be = friction.custom_bejan_from_reynolds(
            self.darcy, self.form_loss, re, self.roughness_ratio, self.length_to_diameter
        )
        return dl.pressure_from_bejan(be, self.hydraulic_diameter_m, self.fluid.density_kg_m3, self.fluid.viscosity_Pa_s)

    def get_mass_flowrate_from_pressure_loss(self, pressure_loss_Pa: float) -> float:
        be = dl.bejan_from_pressure(
            pressure_loss_Pa,
            self.hydraulic_diameter_m,
            self.fluid.density_kg_m3,
            self.fluid.viscosity_Pa_s,
        )
        re = friction.custom_reynolds_from_bejan(
            self.darcy, self.form_loss, be, self.roughness_ratio, self.length_to_diameter
        )
        return dl.mass_flowrate_from_reynolds(
            re,
            self.cross_sectional_area_m2,
            self.hydraulic_diameter_m,
            self.fluid.viscosity_Pa_s,
        )


@dataclass(frozen=True, slots=True)
class CheckValve(FluidComponent):
    """Обратный клапан поверх прямого компонента.

    В обратном направлении потери умножаются на `reverse_resistance_ratio`,
    значения остаются конечными, а прямой и обратный запросы согласованы.
    """

    forward: FluidComponent
    reverse_resistance_ratio: float = 1.0e6
    name: str = "check_valve"

    def __post_init__(self) -> None:
        if not (math.isfinite(self.reverse_resistance_ratio) and self.reverse_resistance_ratio >= 1.0):
            raise ValueError("reverse_resistance_ratio must be finite and >= 1")

    def get_hydrostatic_pressure_change(self) -> float:
        return self.forward.get_hydrostatic_pressure_change()

    def get_internal_pressure_source(self) -> float:
        return self.forward.get_internal_pressure_source()

    def get_pressure_loss(self, mass_flowrate_kg_s: float) -> float:
        loss = self.forward.get_pressure_loss(mass_flowrate_kg_s)
        if mass_flowrate_kg_s < 0.0:
            return float(loss * self.reverse_resistance_ratio)
        return float(loss)

    def get_mass_flowrate_from_pressure_loss(self, pressure_loss_Pa: float) -> float:
        if pressure_loss_Pa < 0.0:
            return self.forward.get_mass_flowrate_from_pressure_loss(pressure_loss_Pa / self.reverse_resistance_ratio)
        return self.forward.get_mass_flowrate_from_pressure_loss(pressure_loss_Pa)
