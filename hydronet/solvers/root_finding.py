"""Поиск корня методом Брента с эскалацией интервалов.

Неудача на одном интервале (нет смены знака или исчерпан лимит итераций)
восстанавливается повторной попыткой на следующем, более широком интервале.
Если не помог ни один интервал, ошибка фатальная.
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple
import logging
import math

import numpy as np
from scipy.optimize import brentq

from hydronet.core.errors import BracketError, ConvergenceError, SolverError, SolverExhaustedError

logger = logging.getLogger(__name__)

Bracket = Tuple[float, float]


def find_root_brent(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    *,
    xtol: float,
    max_iterations: int,
) -> float:
    """Brent's method on [lower, upper].

    Raises:
        BracketError: no sign change (or NaN) at the bracket ends.
        ConvergenceError: iteration budget exhausted.
    """

    a, b = float(min(lower, upper)), float(max(lower, upper))
    fa = float(func(a))
    if fa == 0.0:
        return a
    fb = float(func(b))
    if fb == 0.0:
        return b

    if math.isnan(fa) or math.isnan(fb) or np.sign(fa) == np.sign(fb):
        raise BracketError(f"no sign change on [{a:.6g}, {b:.6g}]: f(a)={fa:.6g}, f(b)={fb:.6g}")

    root, info = brentq(func, a, b, xtol=xtol, maxiter=max_iterations, full_output=True, disp=False)
    if not info.converged:
        raise ConvergenceError(
            f"brent did not converge on [{a:.6g}, {b:.6g}] after {info.iterations} iterations ({info.flag})"
        )
    return float(root)


def find_root_with_escalation(
    func: Callable[[float], float],
    brackets: Iterable[Bracket],
    *,
    xtol: float,
    max_iterations: int,
) -> float:
    """Try each bracket in turn; raise SolverExhaustedError if none works."""

    last_error: SolverError | None = None
    for attempt, (lower, upper) in enumerate(brackets):
        if attempt > 0:
            logger.info("root search escalated to bracket [%.6g, %.6g] after: %s", lower, upper, last_error)
        try:
            return find_root_brent(func, lower, upper, xtol=xtol, max_iterations=max_iterations)
        except (BracketError, ConvergenceError) as exc:
            last_error = exc

    raise SolverExhaustedError(f"root search failed on every bracket: {last_error}") from last_error
