"""hydronet.core.units

Минимальный слой единиц измерения и удобных множителей.

Принцип: везде, где есть числа, должна быть явная единица (например, 2 * INCH).
Внутри библиотеки всё считается в SI: кг/с, Па, м, Па·с.
"""

from __future__ import annotations

import math

# Base units (conceptual SI multipliers)
METER: float = 1.0
KILOGRAM: float = 1.0
SECOND: float = 1.0

# Derived units
NEWTON: float = KILOGRAM * METER / (SECOND**2)
PASCAL: float = NEWTON / (METER**2)
PASCAL_SECOND: float = PASCAL * SECOND

# Convenience multipliers
MILLIMETER: float = 1e-3 * METER
INCH: float = 0.0254 * METER
MILLIPASCAL_SECOND: float = 1e-3 * PASCAL_SECOND

DEG_TO_RAD: float = math.pi / 180.0

# Useful constants
G: float = 9.81 * METER / (SECOND**2)

# Разрешение типичного водяного манометра (~1 мм вод. ст.)
MANOMETER_RESOLUTION: float = 9.0 * PASCAL
