"""
RayFormationGenerator — генерация формации лучей

Алгоритм (для каждого из ray_count лучей, независимо):
1. angle  ~ U[0, 2π)
2. radius ~ U[radius_min, radius_max]
3. end    = (cx + radius·cos(angle), cy + radius·sin(angle))
4. color  = variation.vary(base_color, u) — отдельный draw на каждый луч

Порядок потребления RandomSource фиксирован: angle → radius → color.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ray_count = n → ровно n лучей (n = 0 → пустая последовательность)
2. radius_min ≤ |end - center| ≤ radius_max для каждого луча
3. Запрос валидируется целиком ДО выдачи первого луча (InvalidParameter)
"""

import logging
from typing import Iterator

from src.core.domain.formation import FormationRequest, RayDescriptor
from src.core.domain.geometry import Point2D
from src.core.errors import InvalidParameter
from src.core.math.numerical_safeguards import (
    clamp,
    validate_count,
    validate_in_range,
    validate_non_negative,
)
from src.core.math.polar import FULL_TURN, lerp, polar_offset
from src.starburst.random_source import RandomSource
from src.starburst.variation import get_variation_strategy

logger = logging.getLogger(__name__)


def validate_request(request: FormationRequest) -> None:
    """
    Проверка запроса на генерацию.

    Raises:
        InvalidParameter: Отрицательный/нецелый ray_count, отрицательный или
            нечисловой радиус, min > max, stroke_width ≤ 0, opacity вне [0, 100]
    """
    validate_count(request.ray_count, "ray_count")

    radius = request.radius_range
    validate_non_negative(radius.min, "radius_range.min")
    validate_non_negative(radius.max, "radius_range.max")
    if radius.min > radius.max:
        raise InvalidParameter(
            f"radius_range.min {radius.min} must be <= radius_range.max {radius.max}"
        )

    validate_in_range(request.center.x, "center.x")
    validate_in_range(request.center.y, "center.y")

    validate_non_negative(request.stroke_width, "stroke_width")
    if request.stroke_width == 0:
        raise InvalidParameter("stroke_width must be positive, got 0")

    validate_in_range(request.opacity, "opacity", 0.0, 100.0)


class RayFormationGenerator:
    """
    Генератор формаций лучей.

    Stateless: всё состояние — в FormationRequest и RandomSource.
    """

    def generate(
        self, request: FormationRequest, random_source: RandomSource
    ) -> Iterator[RayDescriptor]:
        """
        Ленивая конечная последовательность лучей.

        Валидация выполняется сразу при вызове, а не при первой итерации.

        Args:
            request: Полное описание формации
            random_source: Источник случайных чисел (потребляется последовательно)

        Returns:
            Итератор ровно request.ray_count лучей

        Raises:
            InvalidParameter: Если запрос невалиден
        """
        validate_request(request)
        strategy = get_variation_strategy(request.variation)

        logger.debug(
            "Generating %d rays at (%.2f, %.2f), radius [%.2f, %.2f], variation=%s",
            request.ray_count,
            request.center.x,
            request.center.y,
            request.radius_range.min,
            request.radius_range.max,
            strategy.kind.value,
        )

        return self._iter_rays(request, random_source, strategy)

    def generate_all(
        self, request: FormationRequest, random_source: RandomSource
    ) -> tuple[RayDescriptor, ...]:
        """Материализованная формация (tuple)."""
        return tuple(self.generate(request, random_source))

    @staticmethod
    def _iter_rays(request, random_source, strategy) -> Iterator[RayDescriptor]:
        center = request.center
        r_min = request.radius_range.min
        r_max = request.radius_range.max

        for _ in range(request.ray_count):
            angle = random_source.next_float() * FULL_TURN
            radius = clamp(lerp(r_min, r_max, random_source.next_float()), r_min, r_max)
            x, y = polar_offset(center.x, center.y, radius, angle)
            color = strategy.vary(request.base_color, random_source.next_float())

            yield RayDescriptor(
                start=center,
                end=Point2D(x, y),
                color=color,
                stroke_width=request.stroke_width,
                opacity=request.opacity,
                blend_mode=request.blend_mode,
            )
