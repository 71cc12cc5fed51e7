"""Перевод расхода и перепада давления в безразмерные числа и обратно.

Re = m·D / (A·μ)
Be_D = ΔP·ρ·D² / μ²
"""

from __future__ import annotations

from hydronet.core.validation import ensure_positive


def reynolds_from_mass_flowrate(
    mass_flowrate_kg_s: float,
    cross_sectional_area_m2: float,
    hydraulic_diameter_m: float,
    viscosity_Pa_s: float,
) -> float:
    ensure_positive(viscosity_Pa_s, "viscosity_Pa_s")
    ensure_positive(hydraulic_diameter_m, "hydraulic_diameter_m")
    ensure_positive(cross_sectional_area_m2, "cross_sectional_area_m2")
    return float(mass_flowrate_kg_s * hydraulic_diameter_m / (cross_sectional_area_m2 * viscosity_Pa_s))


def mass_flowrate_from_reynolds(
    reynolds: float,
    cross_sectional_area_m2: float,
    hydraulic_diameter_m: float,
    viscosity_Pa_s: float,
) -> float:
    ensure_positive(viscosity_Pa_s, "viscosity_Pa_s")
    ensure_positive(hydraulic_diameter_m, "hydraulic_diameter_m")
    ensure_positive(cross_sectional_area_m2, "cross_sectional_area_m2")
    return float(viscosity_Pa_s * cross_sectional_area_m2 * reynolds / hydraulic_diameter_m)


def reynolds_from_velocity(
    density_kg_m3: float,
    velocity_m_s: float,
    hydraulic_diameter_m: float,
    viscosity_Pa_s: float,
) -> float:
    ensure_positive(density_kg_m3, "density_kg_m3")
    ensure_positive(hydraulic_diameter_m, "hydraulic_diameter_m")
    ensure_positive(viscosity_Pa_s, "viscosity_Pa_s")
    return float(density_kg_m3 * velocity_m_s * hydraulic_diameter_m / viscosity_Pa_s)


def bejan_from_pressure(
    pressure_Pa: float,
    hydraulic_diameter_m: float,
    density_kg_m3: float,
    viscosity_Pa_s: float,
) -> float:
    """Bejan number based on hydraulic diameter.

    Sign follows the pressure argument, so a reverse-flow loss gives Be < 0.
    """

    ensure_positive(viscosity_Pa_s, "viscosity_Pa_s")
    ensure_positive(hydraulic_diameter_m, "hydraulic_diameter_m")
    ensure_positive(density_kg_m3, "density_kg_m3")
    d = float(hydraulic_diameter_m)
    return float(pressure_Pa * density_kg_m3 * d * d / (viscosity_Pa_s * viscosity_Pa_s))


def pressure_from_bejan(
    bejan: float,
    hydraulic_diameter_m: float,
    density_kg_m3: float,
    viscosity_Pa_s: float,
) -> float:
    ensure_positive(viscosity_Pa_s, "viscosity_Pa_s")
    ensure_positive(hydraulic_diameter_m, "hydraulic_diameter_m")
    ensure_positive(density_kg_m3, "density_kg_m3")
    d = float(hydraulic_diameter_m)
    return float(bejan * viscosity_Pa_s * viscosity_Pa_s / (density_kg_m3 * d * d))
