import math

import pytest

from hydronet.core.units import INCH, MILLIPASCAL_SECOND
from hydronet.physics import dimensionless as dl


D = 2.0 * INCH
A = math.pi * D * D / 4.0
MU = 18.6 * MILLIPASCAL_SECOND


class TestReynolds:
    def test_reynolds_from_mass_flowrate(self) -> None:
        assert dl.reynolds_from_mass_flowrate(0.1, A, D, MU) == pytest.approx(0.1 * D / (A * MU))

    def test_inverse(self) -> None:
        re = dl.reynolds_from_mass_flowrate(-0.37, A, D, MU)
        assert dl.mass_flowrate_from_reynolds(re, A, D, MU) == pytest.approx(-0.37)

    def test_from_velocity(self) -> None:
        assert dl.reynolds_from_velocity(1000.0, 2.0, 0.05, 1e-3) == pytest.approx(1.0e5)

    @pytest.mark.parametrize("area,diameter,viscosity", [(0.0, D, MU), (A, 0.0, MU), (A, D, 0.0), (A, D, -MU)])
    def test_invalid(self, area: float, diameter: float, viscosity: float) -> None:
        with pytest.raises(ValueError):
            dl.reynolds_from_mass_flowrate(0.1, area, diameter, viscosity)


class TestBejan:
    def test_bejan_from_pressure(self) -> None:
        assert dl.bejan_from_pressure(100.0, D, 1.0, MU) == pytest.approx(100.0 * D * D / (MU * MU))

    @pytest.mark.parametrize("p", [17465.0, -3.0, 0.0])
    def test_inverse(self, p: float) -> None:
        be = dl.bejan_from_pressure(p, D, 1.2, MU)
        assert dl.pressure_from_bejan(be, D, 1.2, MU) == pytest.approx(p)

    def test_invalid_density(self) -> None:
        with pytest.raises(ValueError):
            dl.pressure_from_bejan(1.0, D, 0.0, MU)
