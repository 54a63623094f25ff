"""
Color — доменные модели цвета

Immutable Pydantic модели:
- RGBColor / HSLColor — канонические цвета генератора
- StrokeColor — tagged union цвета обводки цели, как его отдаёт хост
  (RGB, CMYK, Gray, Spot поверх другого цвета, либо отсутствие обводки)

Discriminator union по полю `kind` позволяет адаптеру передавать
plain dict / JSON без ручного разбора.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.core.math.color_math import hsl_to_rgb, rgb_to_hsl


# =============================================================================
# КАНОНИЧЕСКИЕ ЦВЕТА
# =============================================================================


class RGBColor(BaseModel):
    """
    RGB цвет, каналы — целые в [0, 255].

    Immutable модель (frozen=True). Любая вариация создаёт новый экземпляр.
    """

    red: int = Field(..., ge=0, le=255, description="Красный канал")
    green: int = Field(..., ge=0, le=255, description="Зелёный канал")
    blue: int = Field(..., ge=0, le=255, description="Синий канал")

    model_config = {"frozen": True}

    @classmethod
    def from_tuple(cls, rgb: tuple[int, int, int]) -> "RGBColor":
        """Создание из кортежа (red, green, blue)."""
        red, green, blue = rgb
        return cls(red=red, green=green, blue=blue)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    def to_hsl(self) -> "HSLColor":
        """
        Конверсия в HSL.

        Returns:
            HSLColor (float компоненты, без округления)
        """
        hue, saturation, lightness = rgb_to_hsl(self.red, self.green, self.blue)
        return HSLColor(hue=hue, saturation=saturation, lightness=lightness)

    def to_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


class HSLColor(BaseModel):
    """
    HSL цвет: hue в [0, 360), saturation и lightness в [0, 100].
    """

    hue: float = Field(..., ge=0, lt=360, description="Оттенок (градусы)")
    saturation: float = Field(..., ge=0, le=100, description="Насыщенность (%)")
    lightness: float = Field(..., ge=0, le=100, description="Светлота (%)")

    model_config = {"frozen": True}

    def to_rgb(self) -> RGBColor:
        return RGBColor.from_tuple(hsl_to_rgb(self.hue, self.saturation, self.lightness))

    def with_lightness(self, lightness: float) -> "HSLColor":
        """Копия с заменённой светлотой (hue и saturation сохраняются)."""
        return self.model_copy(update={"lightness": lightness})


WHITE = RGBColor(red=255, green=255, blue=255)
BLACK = RGBColor(red=0, green=0, blue=0)


# =============================================================================
# ЦВЕТ ОБВОДКИ (TAGGED UNION)
# =============================================================================


class RGBStroke(BaseModel):
    """RGB обводка. Каналы могут выходить за [0, 255] — clamp при конверсии."""

    kind: Literal["RGB"] = "RGB"
    red: float = Field(..., description="Красный канал")
    green: float = Field(..., description="Зелёный канал")
    blue: float = Field(..., description="Синий канал")

    model_config = {"frozen": True}


class CMYKStroke(BaseModel):
    """CMYK обводка, компоненты в процентах."""

    kind: Literal["CMYK"] = "CMYK"
    cyan: float = Field(..., ge=0, le=100, description="Cyan (%)")
    magenta: float = Field(..., ge=0, le=100, description="Magenta (%)")
    yellow: float = Field(..., ge=0, le=100, description="Yellow (%)")
    black: float = Field(..., ge=0, le=100, description="Black / key (%)")

    model_config = {"frozen": True}


class GrayStroke(BaseModel):
    """Grayscale обводка: процент краски (0 — белый, 100 — чёрный)."""

    kind: Literal["Gray"] = "Gray"
    gray: float = Field(..., ge=0, le=100, description="Процент серого")

    model_config = {"frozen": True}


class NoStroke(BaseModel):
    """Обводка отсутствует."""

    kind: Literal["None"] = "None"

    model_config = {"frozen": True}


class SpotStroke(BaseModel):
    """
    Spot-цвет: именованная ссылка, реальное значение которой задаётся
    вложенным цветом (обычно RGB или CMYK).
    """

    kind: Literal["Spot"] = "Spot"
    name: str = Field("", description="Имя spot-цвета в документе")
    color: "StrokeColor" = Field(..., description="Цвет, на который ссылается spot")

    model_config = {"frozen": True}


StrokeColor = Annotated[
    Union[RGBStroke, CMYKStroke, GrayStroke, SpotStroke, NoStroke],
    Field(discriminator="kind"),
]

SpotStroke.model_rebuild()
