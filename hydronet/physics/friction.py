"""Корреляция Черчилля и связь Be(Re) для трубы с местными сопротивлениями.

Churchill (1977) покрывает ламинарный, переходный и турбулентный режимы одной
формулой:

    B = (37530/Re)^16
    A = (2.457 ln(1 / ((7/Re)^0.9 + 0.27 ε/D)))^16
    f_fanning = 2 ((8/Re)^12 + (A + B)^-1.5)^(1/12)
    f_darcy = 4 f_fanning

Потери записываются в безразмерном виде: Be_D = 0.5 (f L/D + K) Re².
Функции симметричны по знаку: обратный поток даёт Be < 0.
"""

from __future__ import annotations

from typing import Callable
import math

from scipy.optimize import brentq

from hydronet.core.validation import ensure_non_negative, ensure_positive


MAX_REYNOLDS: float = 1.0e12

DarcyCorrelation = Callable[[float, float], float]
FormLossCorrelation = Callable[[float], float]


def fanning(reynolds: float, roughness_ratio: float) -> float:
    ensure_positive(reynolds, "reynolds")
    ensure_non_negative(roughness_ratio, "roughness_ratio")

    re = float(reynolds)
    if re < 1.0:
        # турбулентный вклад ниже машинной точности
        return float(16.0 / re)

    b = (37530.0 / re) ** 16
    a = (2.457 * math.log(1.0 / ((7.0 / re) ** 0.9 + 0.27 * roughness_ratio))) ** 16
    inner = (8.0 / re) ** 12 + (a + b) ** -1.5
    return float(2.0 * inner ** (1.0 / 12.0))


def darcy(reynolds: float, roughness_ratio: float) -> float:
    return 4.0 * fanning(reynolds, roughness_ratio)


def fldk(reynolds: float, roughness_ratio: float, length_to_diameter: float, form_loss_k: float) -> float:
    """f·L/D + K for a straight pipe with lumped fittings."""

    ensure_positive(length_to_diameter, "length_to_diameter")
    ensure_non_negative(form_loss_k, "form_loss_k")
    return float(darcy(reynolds, roughness_ratio) * length_to_diameter + form_loss_k)


def bejan_from_reynolds(
    reynolds: float,
    roughness_ratio: float,
    length_to_diameter: float,
    form_loss_k: float,
) -> float:
    if reynolds == 0.0:
        return 0.0
    re = abs(float(reynolds))
    be = 0.5 * fldk(re, roughness_ratio, length_to_diameter, form_loss_k) * re * re
    return float(math.copysign(be, reynolds))


def _invert_bejan(bejan: float, be_of_re: Callable[[float], float]) -> float:
    """Решение Be(Re) = Be на [0, MAX_REYNOLDS] с учётом знака."""

    if bejan == 0.0:
        return 0.0
    target = abs(float(bejan))
    max_bejan = be_of_re(MAX_REYNOLDS)
    if target >= max_bejan:
        raise ValueError(f"bejan too large: |Be|={target:.6g} >= Be(Re_max)={max_bejan:.6g}")

    re = brentq(lambda r: target - be_of_re(r), 0.0, MAX_REYNOLDS, xtol=1e-14, maxiter=200)
    return float(math.copysign(re, bejan))


def reynolds_from_bejan(
    bejan: float,
    roughness_ratio: float,
    length_to_diameter: float,
    form_loss_k: float,
) -> float:
    ensure_positive(length_to_diameter, "length_to_diameter")
    ensure_non_negative(roughness_ratio, "roughness_ratio")
    ensure_non_negative(form_loss_k, "form_loss_k")
    return _invert_bejan(
        bejan,
        lambda re: bejan_from_reynolds(re, roughness_ratio, length_to_diameter, form_loss_k),
    )


# =============================================================================
# Пользовательские корреляции f(Re, ε/D) и K(Re)
# =============================================================================
def custom_fldk(
    custom_darcy: DarcyCorrelation,
    custom_k: FormLossCorrelation,
    reynolds: float,
    roughness_ratio: float,
    length_to_diameter: float,
) -> float:
    ensure_non_negative(roughness_ratio, "roughness_ratio")
    ensure_positive(length_to_diameter, "length_to_diameter")
    f = float(custom_darcy(reynolds, roughness_ratio))
    k = float(custom_k(reynolds))
    return float(f * length_to_diameter + k)


def custom_bejan_from_reynolds(
    custom_darcy: DarcyCorrelation,
    custom_k: FormLossCorrelation,
    reynolds: float,
    roughness_ratio: float,
    length_to_diameter: float,
) -> float:
    """Be_D = 0.5 (f(Re) L/D + K(Re)) Re².

    The correlations are evaluated at |Re|; the sign of Re is applied to Be.
    """

    if reynolds == 0.0:
        return 0.0
    re = abs(float(reynolds))
    be = 0.5 * custom_fldk(custom_darcy, custom_k, re, roughness_ratio, length_to_diameter) * re * re
    return float(math.copysign(be, reynolds))


def custom_reynolds_from_bejan(
    custom_darcy: DarcyCorrelation,
    custom_k: FormLossCorrelation,
    bejan: float,
    roughness_ratio: float,
    length_to_diameter: float,
) -> float:
    ensure_non_negative(roughness_ratio, "roughness_ratio")
    ensure_positive(length_to_diameter, "length_to_diameter")
    return _invert_bejan(
        bejan,
        lambda re: custom_bejan_from_reynolds(custom_darcy, custom_k, re, roughness_ratio, length_to_diameter),
    )
