"""
Formation — запрос на генерацию и описания лучей

- BlendMode: 14 правил композитинга хоста (порядок как в диалоге настроек)
- VariationStrategyKind: выбор стратегии вариации цвета
- FormationRequest: полное описание одного вызова генерации (без скрытого состояния)
- RayDescriptor: один луч, готовый к отрисовке адаптером
- FormationGroup: лучи одной цели (пара target_index, rays)

Все объекты immutable: создаются на вызов и отбрасываются после отрисовки.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from src.core.domain.color import RGBColor
from src.core.domain.geometry import Point2D, RadiusRange
from src.core.errors import InvalidParameter


# =============================================================================
# ENUMS
# =============================================================================


class BlendMode(str, Enum):
    """Режим наложения штриха на нижележащие цвета."""

    NORMAL = "NORMAL"
    MULTIPLY = "MULTIPLY"
    SCREEN = "SCREEN"
    OVERLAY = "OVERLAY"
    SOFT_LIGHT = "SOFTLIGHT"
    HARD_LIGHT = "HARDLIGHT"
    DARKEN = "DARKEN"
    LIGHTEN = "LIGHTEN"
    DIFFERENCE = "DIFFERENCE"
    EXCLUSION = "EXCLUSION"
    HUE = "HUE"
    SATURATION = "SATURATION"
    COLOR = "COLOR"
    LUMINOSITY = "LUMINOSITY"

    @property
    def display_name(self) -> str:
        """Подпись в выпадающем списке ("Soft Light", "Hard Light", ...)."""
        return _BLEND_MODE_LABELS[self]

    @classmethod
    def from_index(cls, index: int) -> "BlendMode":
        """
        Режим по индексу выпадающего списка.

        Raises:
            InvalidParameter: Если индекс вне [0, 13]
        """
        modes = list(cls)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(modes):
            raise InvalidParameter(
                f"blend mode index must be in [0, {len(modes) - 1}], got {index!r}"
            )
        return modes[index]

    @classmethod
    def display_names(cls) -> list[str]:
        return [mode.display_name for mode in cls]


_BLEND_MODE_LABELS: dict[BlendMode, str] = {
    BlendMode.NORMAL: "Normal",
    BlendMode.MULTIPLY: "Multiply",
    BlendMode.SCREEN: "Screen",
    BlendMode.OVERLAY: "Overlay",
    BlendMode.SOFT_LIGHT: "Soft Light",
    BlendMode.HARD_LIGHT: "Hard Light",
    BlendMode.DARKEN: "Darken",
    BlendMode.LIGHTEN: "Lighten",
    BlendMode.DIFFERENCE: "Difference",
    BlendMode.EXCLUSION: "Exclusion",
    BlendMode.HUE: "Hue",
    BlendMode.SATURATION: "Saturation",
    BlendMode.COLOR: "Color",
    BlendMode.LUMINOSITY: "Luminosity",
}


class VariationStrategyKind(str, Enum):
    """Стратегия получения случайного родственного цвета для луча."""

    HUE_RANDOMIZED_LIGHTNESS = "HUE_RANDOMIZED_LIGHTNESS"
    WHITE_BLEND = "WHITE_BLEND"


# =============================================================================
# REQUEST
# =============================================================================


@dataclass(frozen=True)
class FormationRequest:
    """
    Запрос на генерацию одной формации лучей.

    Самодостаточен: строится заново для каждой цели, между целями
    ничего не разделяется.
    """

    center: Point2D
    radius_range: RadiusRange
    ray_count: int
    base_color: RGBColor
    stroke_width: float = 1.0
    opacity: float = 20.0
    blend_mode: BlendMode = BlendMode.NORMAL
    variation: VariationStrategyKind = VariationStrategyKind.HUE_RANDOMIZED_LIGHTNESS


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RayDescriptor:
    """Один луч: отрезок от центра до случайной точки со своим цветом."""

    start: Point2D
    end: Point2D
    color: RGBColor
    stroke_width: float
    opacity: float
    blend_mode: BlendMode

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def to_payload(self) -> dict[str, Any]:
        """
        Plain dict для адаптера отрисовки.

        Контракт: contracts/schema/ray_formation.json (rays[*])
        """
        return {
            "from": self.start.as_list(),
            "to": self.end.as_list(),
            "color": {
                "red": self.color.red,
                "green": self.color.green,
                "blue": self.color.blue,
            },
            "stroke_width": self.stroke_width,
            "opacity": self.opacity,
            "blend_mode": self.blend_mode.value,
            "stroked": True,
            "filled": False,
        }


class FormationGroup(NamedTuple):
    """
    Лучи одной цели.

    Распаковывается как пара (target_index, rays). Адаптер реализует
    группу как отдельный слой с именованной группой линий.
    """

    target_index: int
    rays: tuple[RayDescriptor, ...]

    @property
    def layer_name(self) -> str:
        return f"Ray layer - {self.target_index + 1}"

    @property
    def group_name(self) -> str:
        return f"Ray formation - {self.target_index + 1}"

    def to_payload(self) -> dict[str, Any]:
        """Контракт: contracts/schema/ray_formation.json"""
        return {
            "target_index": self.target_index,
            "layer_name": self.layer_name,
            "group_name": self.group_name,
            "rays": [ray.to_payload() for ray in self.rays],
        }
