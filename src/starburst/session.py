"""
GenerationSession — построение запросов и запуск генерации по целям

Для каждой выбранной фигуры:
- center = центр bounding box
- radius = [target_radius_min, width/2] (target_radius_min по умолчанию 0:
  пользовательский минимум при наличии целей не применяется)
- base_color = цвет обводки (ColorSpaceConverter) либо случайный цвет из
  RGB-куба, если обводки нет

Без целей — одна формация в центре документа с пользовательскими
радиусом и цветом.

Порядок потребления RandomSource:
1. Случайные базовые цвета (3 draw на каждую цель без обводки, по порядку целей)
2. Лучи цель за целью

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цель получает собственный FormationRequest (без общего изменяемого состояния)
2. UnsupportedColorKind у любой цели прерывает запуск ДО генерации лучей
3. Фигуры хоста только читаются
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Final, Optional, Sequence

from src.core.domain.color import BLACK, RGBColor
from src.core.domain.formation import (
    BlendMode,
    FormationGroup,
    FormationRequest,
    VariationStrategyKind,
)
from src.core.domain.geometry import DocumentCanvas, RadiusRange
from src.core.domain.target import GenerationInput, TargetShape
from src.core.errors import InvalidParameter, MissingStroke
from src.core.math.numerical_safeguards import (
    CHANNEL_MAX,
    clamp,
    validate_count,
    validate_in_range,
    validate_non_negative,
)
from src.starburst.color_space import ColorSpaceConverter, has_valid_stroke
from src.starburst.generator import RayFormationGenerator
from src.starburst.random_source import RandomSource

logger = logging.getLogger(__name__)


# =============================================================================
# ОГРАНИЧЕНИЯ НАСТРОЕК (диалог хоста)
# =============================================================================

MAX_RAY_COUNT: Final[int] = 3000
STROKE_WIDTH_MIN: Final[float] = 1.0
STROKE_WIDTH_MAX: Final[float] = 30.0
OPACITY_MIN: Final[float] = 0.0
OPACITY_MAX: Final[float] = 100.0


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SessionSettings:
    """
    Пользовательские настройки генерации.

    Значения по умолчанию соответствуют диалогу хоста.
    radius_range и base_color применяются только без выбранных целей.
    """

    ray_count: int = 50
    stroke_width: float = 1.0
    radius_range: RadiusRange = field(default_factory=lambda: RadiusRange(0.0, 200.0))
    base_color: RGBColor = BLACK
    opacity: float = 20.0
    blend_mode: BlendMode = BlendMode.NORMAL
    variation: VariationStrategyKind = VariationStrategyKind.HUE_RANDOMIZED_LIGHTNESS

    # Минимальный радиус для целей (пользовательский минимум не применяется)
    target_radius_min: float = 0.0

    def validate(self) -> None:
        """
        Проверка настроек против ограничений диалога.

        Raises:
            InvalidParameter: Если значение вне допустимого диапазона
        """
        validate_count(self.ray_count, "ray_count", MAX_RAY_COUNT)
        validate_in_range(self.stroke_width, "stroke_width", STROKE_WIDTH_MIN, STROKE_WIDTH_MAX)
        validate_in_range(self.opacity, "opacity", OPACITY_MIN, OPACITY_MAX)
        validate_non_negative(self.radius_range.min, "radius_range.min")
        validate_non_negative(self.radius_range.max, "radius_range.max")
        if self.radius_range.min > self.radius_range.max:
            raise InvalidParameter(
                f"radius_range.min {self.radius_range.min} must be <= "
                f"radius_range.max {self.radius_range.max}"
            )
        validate_non_negative(self.target_radius_min, "target_radius_min")


# =============================================================================
# SESSION
# =============================================================================


def random_rgb(random_source: RandomSource) -> RGBColor:
    """
    Цвет, равномерно выбранный из RGB-куба (3 draw: red, green, blue).
    """
    channels = [
        min(math.floor(random_source.next_float() * (CHANNEL_MAX + 1)), CHANNEL_MAX)
        for _ in range(3)
    ]
    return RGBColor.from_tuple((channels[0], channels[1], channels[2]))


def targets_missing_stroke(targets: Sequence[TargetShape]) -> list[int]:
    """Индексы целей без обводки."""
    return [i for i, target in enumerate(targets) if not has_valid_stroke(target.stroke)]


class GenerationSession:
    """
    Оркестратор: один FormationRequest на цель, одна FormationGroup на запрос.
    """

    def __init__(
        self,
        settings: Optional[SessionSettings] = None,
        converter: Optional[ColorSpaceConverter] = None,
        generator: Optional[RayFormationGenerator] = None,
    ):
        """
        Args:
            settings: пользовательские настройки (default SessionSettings())
            converter: конвертер цвета обводки
            generator: генератор формаций

        Raises:
            InvalidParameter: Если настройки невалидны
        """
        self.settings = settings or SessionSettings()
        self.settings.validate()
        self.converter = converter or ColorSpaceConverter()
        self.generator = generator or RayFormationGenerator()

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def request_for_target(
        self, target: TargetShape, random_source: RandomSource
    ) -> FormationRequest:
        """
        Запрос для выбранной фигуры.

        Raises:
            UnsupportedColorKind: Если цвет обводки не поддерживается
        """
        bounds = target.bounds
        try:
            base_color = self.converter.to_rgb(target.stroke)
        except MissingStroke:
            base_color = random_rgb(random_source)

        # Пользовательский минимум выше половины ширины сжимается до неё
        r_max = bounds.half_width
        r_min = min(self.settings.target_radius_min, r_max)

        return self._request(
            center=bounds.center,
            radius_range=RadiusRange(r_min, r_max),
            base_color=base_color,
        )

    def request_for_canvas(self, canvas: DocumentCanvas) -> FormationRequest:
        """
        Запрос для документа без выбранных фигур.

        Радиус ограничивается половиной ширины документа (максимум ползунка).
        """
        limit = canvas.max_radius
        radius = self.settings.radius_range
        r_min = clamp(radius.min, 0.0, limit)
        r_max = clamp(radius.max, 0.0, limit)
        if (r_min, r_max) != (radius.min, radius.max):
            logger.warning(
                "Radius range [%.2f, %.2f] exceeds canvas limit %.2f, clamped to [%.2f, %.2f]",
                radius.min,
                radius.max,
                limit,
                r_min,
                r_max,
            )

        return self._request(
            center=canvas.center,
            radius_range=RadiusRange(r_min, r_max),
            base_color=self.settings.base_color,
        )

    def build_requests(
        self,
        canvas: DocumentCanvas,
        targets: Sequence[TargetShape],
        random_source: RandomSource,
    ) -> tuple[FormationRequest, ...]:
        """
        Запросы для всех целей (или один запрос для документа).

        Raises:
            UnsupportedColorKind: Если цвет обводки какой-либо цели не поддерживается
        """
        if not targets:
            return (self.request_for_canvas(canvas),)

        missing = targets_missing_stroke(targets)
        if missing:
            logger.warning(
                "Targets %s lack stroke colors, random colors will be applied", missing
            )

        return tuple(self.request_for_target(target, random_source) for target in targets)

    # -------------------------------------------------------------------------
    # Генерация
    # -------------------------------------------------------------------------

    def run(
        self,
        canvas: DocumentCanvas,
        targets: Sequence[TargetShape],
        random_source: RandomSource,
    ) -> tuple[FormationGroup, ...]:
        """
        Генерация формаций: по одной группе на цель (index 0 без целей).

        Returns:
            tuple FormationGroup в порядке целей
        """
        requests = self.build_requests(canvas, targets, random_source)

        groups = []
        for index, request in enumerate(requests):
            rays = self.generator.generate_all(request, random_source)
            groups.append(FormationGroup(target_index=index, rays=rays))

        logger.info(
            "Generated %d formation(s), %d rays total",
            len(groups),
            sum(len(g.rays) for g in groups),
        )
        return tuple(groups)

    def run_input(
        self, generation_input: GenerationInput, random_source: RandomSource
    ) -> tuple[FormationGroup, ...]:
        """run() для распарсенного снимка документа."""
        return self.run(generation_input.canvas, generation_input.targets, random_source)

    def _request(
        self, center, radius_range: RadiusRange, base_color: RGBColor
    ) -> FormationRequest:
        s = self.settings
        return FormationRequest(
            center=center,
            radius_range=radius_range,
            ray_count=s.ray_count,
            base_color=base_color,
            stroke_width=s.stroke_width,
            opacity=s.opacity,
            blend_mode=s.blend_mode,
            variation=s.variation,
        )
