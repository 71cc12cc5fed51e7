"""Характеристики элементов в виде таблиц pandas.

Удобно для проверки обратимости и для построения кривых вне библиотеки.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np
import pandas as pd

from hydronet.core.types import FlowElement


CURVE_COLUMNS: List[str] = [
    "mass_flowrate_kg_s",
    "pressure_change_Pa",
    "pressure_loss_Pa",
]


def characteristic_curve(element: FlowElement, mass_flowrates_kg_s: Iterable[float]) -> pd.DataFrame:
    rows = []
    for q in np.asarray(list(mass_flowrates_kg_s), dtype=np.float64):
        rows.append(
            {
                "mass_flowrate_kg_s": float(q),
                "pressure_change_Pa": element.get_pressure_change(float(q)),
                "pressure_loss_Pa": element.get_pressure_loss(float(q)),
            }
        )
    return pd.DataFrame(rows, columns=CURVE_COLUMNS)


def round_trip_table(element: FlowElement, mass_flowrates_kg_s: Iterable[float]) -> pd.DataFrame:
    """Curve plus the flow recovered from each pressure change."""

    df = characteristic_curve(element, mass_flowrates_kg_s)
    df["recovered_mass_flowrate_kg_s"] = [
        element.get_mass_flowrate_from_pressure_change(float(p)) for p in df["pressure_change_Pa"]
    ]
    df["round_trip_error_kg_s"] = df["recovered_mass_flowrate_kg_s"] - df["mass_flowrate_kg_s"]
    return df
