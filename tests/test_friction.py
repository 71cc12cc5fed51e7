import math

import pytest

from hydronet.physics import friction


class TestChurchill:
    @pytest.mark.parametrize("re", [0.5, 10.0, 100.0, 1000.0])
    def test_laminar_limit(self, re: float) -> None:
        assert friction.darcy(re, 0.0) == pytest.approx(64.0 / re, rel=1e-9)

    def test_smooth_turbulent_close_to_blasius(self) -> None:
        re = 1.0e5
        blasius = 0.316 / re**0.25
        assert friction.darcy(re, 0.0) == pytest.approx(blasius, rel=0.05)

    def test_roughness_increases_turbulent_friction(self) -> None:
        assert friction.darcy(1.0e6, 1e-3) > friction.darcy(1.0e6, 0.0)

    def test_fanning_is_quarter_darcy(self) -> None:
        assert friction.fanning(5000.0, 1e-4) == pytest.approx(friction.darcy(5000.0, 1e-4) / 4.0)

    @pytest.mark.parametrize("re,rr", [(0.0, 0.0), (-10.0, 0.0), (100.0, -1e-3)])
    def test_invalid_inputs(self, re: float, rr: float) -> None:
        with pytest.raises(ValueError):
            friction.fanning(re, rr)

    def test_fldk(self) -> None:
        re = 200.0
        assert friction.fldk(re, 0.0, 20.0, 5.0) == pytest.approx(64.0 / re * 20.0 + 5.0)

    @pytest.mark.parametrize("l_over_d,k", [(0.0, 1.0), (10.0, -1.0)])
    def test_fldk_invalid(self, l_over_d: float, k: float) -> None:
        with pytest.raises(ValueError):
            friction.fldk(100.0, 0.0, l_over_d, k)


class TestBejanReynolds:
    def test_zero(self) -> None:
        assert friction.bejan_from_reynolds(0.0, 0.0, 10.0, 1.0) == 0.0
        assert friction.reynolds_from_bejan(0.0, 0.0, 10.0, 1.0) == 0.0

    def test_odd_symmetry(self) -> None:
        be = friction.bejan_from_reynolds(3000.0, 1e-4, 50.0, 2.0)
        assert friction.bejan_from_reynolds(-3000.0, 1e-4, 50.0, 2.0) == pytest.approx(-be)

    @pytest.mark.parametrize("re", [0.5, 150.0, 3000.0, 1.0e5, -2500.0])
    def test_inversion(self, re: float) -> None:
        be = friction.bejan_from_reynolds(re, 4e-5, 19.685, 5.0)
        assert friction.reynolds_from_bejan(be, 4e-5, 19.685, 5.0) == pytest.approx(re, rel=1e-8)

    def test_bejan_too_large(self) -> None:
        be_max = friction.bejan_from_reynolds(friction.MAX_REYNOLDS, 0.0, 10.0, 0.0)
        with pytest.raises(ValueError, match="too large"):
            friction.reynolds_from_bejan(2.0 * be_max, 0.0, 10.0, 0.0)


def _no_friction(re: float, rr: float) -> float:
    return 0.0


def _hose_k(re: float) -> float:
    return 400.0 + 52000.0 / re


class TestCustomCorrelation:
    def test_custom_bejan(self) -> None:
        re = 100.0
        expected = 0.5 * (400.0 + 520.0) * re * re
        assert friction.custom_bejan_from_reynolds(_no_friction, _hose_k, re, 0.0, 10.0) == pytest.approx(expected)

    def test_custom_fldk_uses_both_correlations(self) -> None:
        fldk = friction.custom_fldk(lambda re, rr: 0.02, lambda re: 3.0, 1e4, 0.0, 50.0)
        assert fldk == pytest.approx(0.02 * 50.0 + 3.0)

    @pytest.mark.parametrize("re", [1.0, 100.0, 5000.0, -100.0])
    def test_custom_inversion(self, re: float) -> None:
        be = friction.custom_bejan_from_reynolds(_no_friction, _hose_k, re, 0.0, 10.0)
        got = friction.custom_reynolds_from_bejan(_no_friction, _hose_k, be, 0.0, 10.0)
        assert got == pytest.approx(re, rel=1e-8)

    def test_custom_sign(self) -> None:
        be = friction.custom_bejan_from_reynolds(_no_friction, _hose_k, -50.0, 0.0, 10.0)
        assert be < 0.0
        assert math.isfinite(be)
