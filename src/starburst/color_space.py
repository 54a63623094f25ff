"""
ColorSpaceConverter — нормализация цвета обводки в RGB

Поддерживаемые виды:
- RGB: pass-through + clamp
- CMYK: channel = 255 × (1 - component/100) × (1 - black/100)
- Gray: channel = 255 × (1 - gray/100) для всех трёх каналов
- Spot: разворачивается до вложенного RGB или CMYK (рекурсивно)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в [0, 255], round half up
2. NoStroke → MissingStroke
3. Неизвестный вид / Spot поверх Gray → UnsupportedColorKind
4. Без побочных эффектов
"""

from src.core.domain.color import (
    CMYKStroke,
    GrayStroke,
    NoStroke,
    RGBColor,
    RGBStroke,
    SpotStroke,
)
from src.core.errors import MissingStroke, UnsupportedColorKind
from src.core.math.color_math import cmyk_to_rgb, gray_to_rgb
from src.core.math.numerical_safeguards import clamp_channel


def has_valid_stroke(stroke: object) -> bool:
    """
    Есть ли у цели обводка, пригодная для извлечения цвета.

    Returns:
        False для None и NoStroke, True для остальных
    """
    return stroke is not None and not isinstance(stroke, NoStroke)


class ColorSpaceConverter:
    """
    Конвертер цвета обводки хоста в канонический RGBColor.

    Stateless: один экземпляр можно разделять между сессиями.
    """

    def to_rgb(self, source: object) -> RGBColor:
        """
        Конверсия цвета обводки в RGB.

        Args:
            source: Вариант StrokeColor (RGBStroke, CMYKStroke, GrayStroke,
                SpotStroke) или NoStroke

        Returns:
            RGBColor с каналами в [0, 255]

        Raises:
            MissingStroke: Если обводки нет (None или NoStroke)
            UnsupportedColorKind: Если вид цвета не поддерживается
        """
        if not has_valid_stroke(source):
            raise MissingStroke("Target has no stroke color to convert")

        if isinstance(source, SpotStroke):
            return self._resolve_spot(source)

        return self._convert_process(source)

    def _convert_process(self, source: object) -> RGBColor:
        """RGB / CMYK / Gray — цвета, задающие значение напрямую."""
        if isinstance(source, RGBStroke):
            return RGBColor(
                red=clamp_channel(source.red),
                green=clamp_channel(source.green),
                blue=clamp_channel(source.blue),
            )

        if isinstance(source, CMYKStroke):
            return RGBColor.from_tuple(
                cmyk_to_rgb(source.cyan, source.magenta, source.yellow, source.black)
            )

        if isinstance(source, GrayStroke):
            return RGBColor.from_tuple(gray_to_rgb(source.gray))

        raise UnsupportedColorKind(f"Unsupported color type: {_kind_of(source)}")

    def _resolve_spot(self, spot: SpotStroke) -> RGBColor:
        """
        Разворачивание spot-цвета.

        Вложенные spot разворачиваются до RGB или CMYK. Spot поверх Gray
        или поверх отсутствующего цвета не поддерживается.
        """
        underlying = spot.color
        while isinstance(underlying, SpotStroke):
            underlying = underlying.color

        if not isinstance(underlying, (RGBStroke, CMYKStroke)):
            raise UnsupportedColorKind(
                f"Unsupported spot color '{spot.name}': "
                f"underlying type {_kind_of(underlying)}"
            )

        return self._convert_process(underlying)


def _kind_of(source: object) -> str:
    kind = getattr(source, "kind", None)
    return kind if isinstance(kind, str) else type(source).__name__
