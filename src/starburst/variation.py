"""
ColorVariation — стратегии случайного родственного цвета

Обе стратегии — чистые функции (RGBColor, u ∈ [0, 1]) → RGBColor и
взаимозаменяемы без изменения вызывающего кода:

- HueRandomizedLightness: RGB → HSL, lightness := u × 100, HSL → RGB.
  Hue и saturation сохраняются, меняется только светлота.
- WhiteBlend ("whiter shade of"): channel' = channel × mix + 255 × (1 - mix),
  mix ∈ {0.0, 0.1, ..., 1.0} выбирается по u равновероятно.
  mix = 1.0 → исходный цвет, mix = 0.0 → белый.
"""

import math
from typing import Final, Protocol

from src.core.domain.color import RGBColor
from src.core.domain.formation import VariationStrategyKind
from src.core.errors import InvalidParameter
from src.core.math.color_math import PERCENT_MAX, blend_toward_white
from src.core.math.numerical_safeguards import validate_in_range

# Количество шагов mix у WhiteBlend: {0.0, 0.1, ..., 1.0}
WHITE_BLEND_STEPS: Final[int] = 10


class ColorVariation(Protocol):
    """Стратегия вариации цвета луча."""

    kind: VariationStrategyKind

    def vary(self, base: RGBColor, u: float) -> RGBColor:
        ...


class HueRandomizedLightness:
    """Случайная светлота при сохранении hue/saturation (HSL round-trip)."""

    kind = VariationStrategyKind.HUE_RANDOMIZED_LIGHTNESS

    def vary(self, base: RGBColor, u: float) -> RGBColor:
        validate_in_range(u, "u", 0.0, 1.0)
        return base.to_hsl().with_lightness(u * PERCENT_MAX).to_rgb()


class WhiteBlend:
    """Линейное смешивание с белым на случайную долю mix."""

    kind = VariationStrategyKind.WHITE_BLEND

    @staticmethod
    def mix_for(u: float) -> float:
        """
        Отображение u ∈ [0, 1] → mix ∈ {0.0, 0.1, ..., 1.0}.

        Каждое из 11 значений равновероятно для u ∈ [0, 1); u = 1.0 → 1.0.

        Examples:
            >>> WhiteBlend.mix_for(0.0)
            0.0
            >>> WhiteBlend.mix_for(0.5)
            0.5
            >>> WhiteBlend.mix_for(1.0)
            1.0
        """
        validate_in_range(u, "u", 0.0, 1.0)
        step = min(math.floor(u * (WHITE_BLEND_STEPS + 1)), WHITE_BLEND_STEPS)
        return step / WHITE_BLEND_STEPS

    def vary(self, base: RGBColor, u: float) -> RGBColor:
        mix = self.mix_for(u)
        return RGBColor.from_tuple(blend_toward_white(base.red, base.green, base.blue, mix))


# =============================================================================
# REGISTRY
# =============================================================================


_STRATEGIES: dict[VariationStrategyKind, ColorVariation] = {
    VariationStrategyKind.HUE_RANDOMIZED_LIGHTNESS: HueRandomizedLightness(),
    VariationStrategyKind.WHITE_BLEND: WhiteBlend(),
}


def get_variation_strategy(kind: VariationStrategyKind) -> ColorVariation:
    """
    Стратегия по её виду.

    Raises:
        InvalidParameter: Если вид неизвестен
    """
    try:
        return _STRATEGIES[VariationStrategyKind(kind)]
    except (KeyError, ValueError):
        raise InvalidParameter(f"Unknown variation strategy: {kind!r}") from None
