"""Коллекции: последовательные, параллельные и супер-коллекции."""

from __future__ import annotations

from .base import CollectionMethods, MemberCollection
from .parallel import ParallelCollection
from .series import SeriesCollection
from .super_collection import ParallelSuperCollection, SeriesSuperCollection, SuperCollection

__all__ = [
    "CollectionMethods",
    "MemberCollection",
    "SeriesCollection",
    "ParallelCollection",
    "ParallelSuperCollection",
    "SeriesSuperCollection",
    "SuperCollection",
]
