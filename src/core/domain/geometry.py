"""
Geometry — геометрические value objects

Система координат хоста (фиксирована для всего пакета):
- начало — левый верхний угол артборда
- x растёт вправо, y растёт ВВЕРХ (точки артборда имеют y ≤ 0)
- (x, y) у BoundingBox — левый верхний угол фигуры

Отсюда:
    BoundingBox.center    = (x + width/2, y - height/2)
    DocumentCanvas.center = (width/2, -height/2)
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field

from src.core.math.polar import distance


# =============================================================================
# ТОЧКИ И ДИАПАЗОНЫ
# =============================================================================


@dataclass(frozen=True)
class Point2D:
    """Точка на плоскости в координатах хоста."""

    x: float
    y: float

    def distance_to(self, other: "Point2D") -> float:
        return distance(self.x, self.y, other.x, other.y)

    def as_list(self) -> list[float]:
        return [self.x, self.y]


@dataclass(frozen=True)
class RadiusRange:
    """
    Диапазон радиусов лучей [min, max] в единицах документа.

    Инвариант min ≤ max и неотрицательность проверяются генератором
    (InvalidParameter), а не при создании: запрос должен описывать вход
    полностью, даже невалидный.
    """

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float, tol: float = 1e-9) -> bool:
        return self.min - tol <= value <= self.max + tol


# =============================================================================
# МОДЕЛИ ХОСТА
# =============================================================================


class BoundingBox(BaseModel):
    """
    Bounding box фигуры-цели, как его отдаёт хост.

    Read-only: ядро никогда не изменяет фигуры хоста.
    """

    x: float = Field(..., description="Левая граница")
    y: float = Field(..., description="Верхняя граница (ось y вверх)")
    width: float = Field(..., ge=0, description="Ширина")
    height: float = Field(..., ge=0, description="Высота")

    model_config = {"frozen": True}

    @property
    def center(self) -> Point2D:
        return Point2D(self.x + self.width / 2, self.y - self.height / 2)

    @property
    def half_width(self) -> float:
        return self.width / 2


class DocumentCanvas(BaseModel):
    """Размеры документа (артборда)."""

    width: float = Field(..., gt=0, description="Ширина документа")
    height: float = Field(..., gt=0, description="Высота документа")

    model_config = {"frozen": True}

    @property
    def center(self) -> Point2D:
        return Point2D(self.width / 2, -self.height / 2)

    @property
    def max_radius(self) -> float:
        """Верхняя граница радиуса в настройках: половина ширины документа."""
        return self.width / 2
