"""
Core math modules для генератора лучей

Математические примитивы: численные защиты, цветовые пространства, полярная геометрия.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    clamp,
    clamp_channel,
    is_valid_float,
    round_half_up,
    validate_count,
    validate_in_range,
    validate_non_negative,
)

# Color Math
from src.core.math.color_math import (
    HUE_MAX,
    PERCENT_MAX,
    blend_toward_white,
    cmyk_to_rgb,
    gray_to_rgb,
    hsl_to_rgb,
    rgb_to_hsl,
)

# Polar
from src.core.math.polar import FULL_TURN, distance, lerp, polar_offset

__all__ = [
    # Numerical Safeguards — Constants
    "CHANNEL_MAX",
    "CHANNEL_MIN",
    # Numerical Safeguards — Functions
    "clamp",
    "clamp_channel",
    "is_valid_float",
    "round_half_up",
    # Numerical Safeguards — Validation
    "validate_count",
    "validate_in_range",
    "validate_non_negative",
    # Color Math
    "HUE_MAX",
    "PERCENT_MAX",
    "blend_toward_white",
    "cmyk_to_rgb",
    "gray_to_rgb",
    "hsl_to_rgb",
    "rgb_to_hsl",
    # Polar
    "FULL_TURN",
    "distance",
    "lerp",
    "polar_offset",
]
