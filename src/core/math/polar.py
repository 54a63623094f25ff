"""
Polar — полярные смещения на плоскости

Координаты в системе хоста; ось y не переворачивается здесь, угол
отсчитывается от +x в сторону +y.
"""

import math
from typing import Final

FULL_TURN: Final[float] = 2.0 * math.pi


def polar_offset(
    center_x: float, center_y: float, radius: float, angle: float
) -> tuple[float, float]:
    """
    Точка на расстоянии radius от центра под углом angle (радианы).

    Returns:
        (x, y) = (cx + r·cos(a), cy + r·sin(a))
    """
    return (
        center_x + radius * math.cos(angle),
        center_y + radius * math.sin(angle),
    )


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Евклидово расстояние между двумя точками."""
    return math.hypot(x2 - x1, y2 - y1)


def lerp(start: float, end: float, t: float) -> float:
    """Линейная интерполяция: start + t × (end - start)."""
    return start + t * (end - start)
