"""
Target — фигура-цель, от центра которой строится формация

Read-only снимок объекта хоста: bounding box и цвет обводки.
Соответствует contracts/schema/generation_input.json (targets[*]).
"""

from pydantic import BaseModel, Field

from src.core.domain.color import NoStroke, StrokeColor
from src.core.domain.geometry import BoundingBox, DocumentCanvas


class TargetShape(BaseModel):
    """
    Выбранная фигура документа.

    Immutable модель (frozen=True). stroke по умолчанию — NoStroke.
    """

    bounds: BoundingBox = Field(..., description="Bounding box фигуры")
    stroke: StrokeColor = Field(default_factory=NoStroke, description="Цвет обводки")

    model_config = {"frozen": True}

    @property
    def has_stroke(self) -> bool:
        return not isinstance(self.stroke, NoStroke)


class GenerationInput(BaseModel):
    """
    Снимок документа для одной генерации: размеры и выбранные фигуры.

    Пустой targets — генерация одной формации в центре документа.
    Контракт: contracts/schema/generation_input.json
    """

    canvas: DocumentCanvas = Field(..., description="Размеры документа")
    targets: tuple[TargetShape, ...] = Field(default=(), description="Выбранные фигуры")

    model_config = {"frozen": True}
