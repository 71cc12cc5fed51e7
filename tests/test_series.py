import math

import pytest

from hydronet.config.solver import SolverConfig
from hydronet.core.errors import SolverExhaustedError
from hydronet.core.units import INCH, MILLIMETER, MILLIPASCAL_SECOND
from hydronet.network import SeriesCollection
from hydronet.physics import FluidProperties, Pipe
from hydronet.solvers.series import series_flow_brackets


class LinearResistor:
    """ΔP = −R·m + baseline."""

    def __init__(self, resistance: float, baseline_Pa: float = 0.0) -> None:
        self.resistance = float(resistance)
        self.baseline_Pa = float(baseline_Pa)

    def get_pressure_change(self, mass_flowrate_kg_s: float) -> float:
        return -self.resistance * mass_flowrate_kg_s + self.baseline_Pa

    def get_mass_flowrate_from_pressure_change(self, pressure_change_Pa: float) -> float:
        return (self.baseline_Pa - pressure_change_Pa) / self.resistance

    def get_pressure_loss(self, mass_flowrate_kg_s: float) -> float:
        return self.resistance * mass_flowrate_kg_s

    def get_mass_flowrate_from_pressure_loss(self, pressure_loss_Pa: float) -> float:
        return pressure_loss_Pa / self.resistance


@pytest.fixture()
def air_pipe() -> Pipe:
    air = FluidProperties(density_kg_m3=1.0, viscosity_Pa_s=18.6 * MILLIPASCAL_SECOND, name="air")
    return Pipe(
        fluid=air,
        hydraulic_diameter_m=2.0 * INCH,
        length_m=1.0,
        absolute_roughness_m=0.002 * MILLIMETER,
        form_loss_k=5.0,
    )


@pytest.fixture()
def ten_pipes(air_pipe: Pipe) -> SeriesCollection:
    return SeriesCollection([air_pipe] * 10)


class TestSeriesPressureChange:
    @pytest.mark.parametrize("n", [1, 3, 10])
    def test_sum_of_members(self, air_pipe: Pipe, n: int) -> None:
        col = SeriesCollection([air_pipe] * n)
        assert col.get_pressure_change(0.1) == pytest.approx(n * air_pipe.get_pressure_change(0.1))

    def test_ten_air_pipes_reference(self, ten_pipes: SeriesCollection) -> None:
        assert ten_pipes.get_pressure_change(0.1) == pytest.approx(-174650.0, rel=1e-3)

    def test_pressure_loss_relative_to_baseline(self) -> None:
        col = SeriesCollection([LinearResistor(2.0, baseline_Pa=-100.0), LinearResistor(3.0)])
        assert col.get_pressure_loss(5.0) == pytest.approx(25.0)
        assert col.get_mass_flowrate_from_pressure_loss(25.0) == pytest.approx(5.0)

    def test_empty_collection(self) -> None:
        with pytest.raises(ValueError):
            SeriesCollection().get_pressure_change(0.1)


class TestSeriesFlowFromPressure:
    def test_ten_air_pipes_reference(self, ten_pipes: SeriesCollection) -> None:
        assert ten_pipes.get_mass_flowrate_from_pressure_change(-174650.0) == pytest.approx(0.1, rel=1e-3)

    @pytest.mark.parametrize("q", [0.0, 0.001, 0.1, 0.5, -0.1])
    def test_round_trip(self, ten_pipes: SeriesCollection, q: float) -> None:
        dp = ten_pipes.get_pressure_change(q)
        assert ten_pipes.get_mass_flowrate_from_pressure_change(dp) == pytest.approx(q, rel=1e-9, abs=1e-12)

    def test_reverse_flow_sign(self, ten_pipes: SeriesCollection) -> None:
        assert ten_pipes.get_mass_flowrate_from_pressure_change(+5000.0) < 0.0

    def test_dead_band_returns_exact_zero(self, ten_pipes: SeriesCollection) -> None:
        # эвристика: разрешение манометра 9 Па
        assert ten_pipes.get_mass_flowrate_from_pressure_change(-8.9) == 0.0
        assert ten_pipes.get_mass_flowrate_from_pressure_change(+8.9) == 0.0
        assert ten_pipes.get_mass_flowrate_from_pressure_change(-9.5) > 0.0

    def test_dead_band_is_relative_to_zero_flow_baseline(self) -> None:
        col = SeriesCollection([LinearResistor(10.0, baseline_Pa=-100.0)])
        assert col.get_mass_flowrate_from_pressure_change(-105.0) == 0.0
        assert col.get_mass_flowrate_from_pressure_change(-120.0) == pytest.approx(2.0)

    def test_dead_band_is_configurable(self) -> None:
        col = SeriesCollection([LinearResistor(10.0)], config=SolverConfig(dead_band_Pa=0.0))
        assert col.get_mass_flowrate_from_pressure_change(-5.0) == pytest.approx(0.5)

    @pytest.mark.parametrize("q", [20.0, 5.0e4, -300.0])
    def test_escalates_beyond_first_bracket(self, q: float) -> None:
        col = SeriesCollection([LinearResistor(1.0), LinearResistor(1.0)])
        dp = col.get_pressure_change(q)
        assert col.get_mass_flowrate_from_pressure_change(dp) == pytest.approx(q, rel=1e-9)

    def test_exhausted_brackets_are_fatal(self) -> None:
        col = SeriesCollection([LinearResistor(1e-9)])
        with pytest.raises(SolverExhaustedError):
            col.get_mass_flowrate_from_pressure_change(-1000.0)


class TestSeriesBrackets:
    def test_forward(self) -> None:
        assert series_flow_brackets(True, SolverConfig()) == [(0.0, 10.0), (-1e4, 1e4), (-2e7, 2e7)]

    def test_reverse(self) -> None:
        assert series_flow_brackets(False, SolverConfig())[0] == (-10.0, 0.0)

    def test_brackets_are_finite(self) -> None:
        assert all(math.isfinite(b) for pair in series_flow_brackets(True, SolverConfig()) for b in pair)
