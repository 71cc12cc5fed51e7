"""Исключения численных решателей.

Физически невозможный ввод (отрицательная вязкость и т.п.) сигнализируется
`ValueError` в месте проверки. Здесь только отказы самого поиска корня.
"""

from __future__ import annotations


class SolverError(RuntimeError):
    pass


class BracketError(SolverError):
    """Функция не меняет знак на заданном интервале."""


class ConvergenceError(SolverError):
    """Исчерпан лимит итераций."""


class SolverExhaustedError(SolverError):
    """Ни один из интервалов поиска не дал корня."""
