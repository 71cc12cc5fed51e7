"""hydronet: расчёт связи расход/перепад давления в гидравлических сетях.

Пакет намеренно не импортирует подмодули при импорте `hydronet`, чтобы
импорт оставался дешёвым и без побочных эффектов.
"""

from __future__ import annotations

__all__ = [
    "core",
    "config",
    "physics",
    "solvers",
    "network",
    "state",
    "curves",
]
