"""Starburst — генерация радиальных формаций лучей.

- ColorSpaceConverter: цвет обводки хоста → RGB
- ColorVariation: HueRandomizedLightness / WhiteBlend
- RayFormationGenerator: лучи одной формации
- GenerationSession: запросы по целям и запуск генерации
"""

from .color_space import ColorSpaceConverter, has_valid_stroke
from .generator import RayFormationGenerator, validate_request
from .random_source import RandomSource, SequenceRandomSource, SystemRandomSource
from .session import (
    MAX_RAY_COUNT,
    GenerationSession,
    SessionSettings,
    random_rgb,
    targets_missing_stroke,
)
from .variation import (
    ColorVariation,
    HueRandomizedLightness,
    WhiteBlend,
    get_variation_strategy,
)

__all__ = [
    "ColorSpaceConverter",
    "has_valid_stroke",
    "ColorVariation",
    "HueRandomizedLightness",
    "WhiteBlend",
    "get_variation_strategy",
    "RandomSource",
    "SystemRandomSource",
    "SequenceRandomSource",
    "RayFormationGenerator",
    "validate_request",
    "GenerationSession",
    "SessionSettings",
    "MAX_RAY_COUNT",
    "random_rgb",
    "targets_missing_stroke",
]
