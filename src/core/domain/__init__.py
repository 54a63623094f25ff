"""
Domain models and value objects.

Contains fundamental domain entities: colors, stroke colors, geometry,
formation requests and ray descriptors.
"""

from src.core.domain.color import (
    BLACK,
    WHITE,
    CMYKStroke,
    GrayStroke,
    HSLColor,
    NoStroke,
    RGBColor,
    RGBStroke,
    SpotStroke,
    StrokeColor,
)
from src.core.domain.formation import (
    BlendMode,
    FormationGroup,
    FormationRequest,
    RayDescriptor,
    VariationStrategyKind,
)
from src.core.domain.geometry import BoundingBox, DocumentCanvas, Point2D, RadiusRange
from src.core.domain.target import GenerationInput, TargetShape

__all__ = [
    # Colors
    "RGBColor",
    "HSLColor",
    "WHITE",
    "BLACK",
    # Stroke colors
    "StrokeColor",
    "RGBStroke",
    "CMYKStroke",
    "GrayStroke",
    "SpotStroke",
    "NoStroke",
    # Geometry
    "Point2D",
    "RadiusRange",
    "BoundingBox",
    "DocumentCanvas",
    # Targets
    "TargetShape",
    "GenerationInput",
    # Formation
    "BlendMode",
    "VariationStrategyKind",
    "FormationRequest",
    "RayDescriptor",
    "FormationGroup",
]
