"""
Color Math — конверсии цветовых пространств

Чистые функции над числами (без доменных моделей):
- RGB (0-255) ↔ HSL (hue 0-360, saturation 0-100, lightness 0-100)
- CMYK (проценты) → RGB
- Grayscale (процент краски) → RGB
- Смешивание с белым ("whiter shade of")

ИНВАРИАНТЫ:
1. hsl_to_rgb(*rgb_to_hsl(r, g, b)) == (r, g, b) с точностью ±1 на канал
2. Результаты в RGB всегда в [0, 255] (clamp + round half up)
3. Ахроматический цвет (r == g == b) → hue = saturation = 0

ФОРМУЛЫ:
    CMYK: channel = 255 × (1 - component/100) × (1 - black/100)
    Gray: channel = 255 × (1 - gray/100)
    White blend: channel' = channel × mix + 255 × (1 - mix)
"""

from typing import Final

from src.core.math.numerical_safeguards import CHANNEL_MAX, clamp, clamp_channel

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

HUE_MAX: Final[float] = 360.0
PERCENT_MAX: Final[float] = 100.0


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(red: float, green: float, blue: float) -> tuple[float, float, float]:
    """
    Конверсия RGB → HSL.

    Args:
        red: Красный канал (0-255)
        green: Зелёный канал (0-255)
        blue: Синий канал (0-255)

    Returns:
        (hue, saturation, lightness):
            - hue в [0, 360)
            - saturation в [0, 100]
            - lightness в [0, 100]

    Examples:
        >>> rgb_to_hsl(255, 0, 0)
        (0.0, 100.0, 50.0)
        >>> rgb_to_hsl(128, 128, 128)[:2]
        (0.0, 0.0)
    """
    r = red / CHANNEL_MAX
    g = green / CHANNEL_MAX
    b = blue / CHANNEL_MAX

    max_v = max(r, g, b)
    min_v = min(r, g, b)
    lightness = (max_v + min_v) / 2.0

    if max_v == min_v:
        # Ахроматический цвет
        return 0.0, 0.0, lightness * PERCENT_MAX

    d = max_v - min_v
    saturation = d / (2.0 - max_v - min_v) if lightness > 0.5 else d / (max_v + min_v)

    if max_v == r:
        hue = (g - b) / d + (6.0 if g < b else 0.0)
    elif max_v == g:
        hue = (b - r) / d + 2.0
    else:
        hue = (r - g) / d + 4.0
    hue /= 6.0

    # hue == 1.0 возможен только из-за погрешности float
    hue_deg = (hue * HUE_MAX) % HUE_MAX

    return hue_deg, saturation * PERCENT_MAX, lightness * PERCENT_MAX


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Одна компонента RGB из HSL (t — сдвинутый hue в долях оборота)."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """
    Конверсия HSL → RGB.

    Args:
        hue: Оттенок в градусах (любое значение, приводится по модулю 360)
        saturation: Насыщенность (0-100, вне диапазона → clamp)
        lightness: Светлота (0-100, вне диапазона → clamp)

    Returns:
        (red, green, blue) — целые в [0, 255]

    Examples:
        >>> hsl_to_rgb(0.0, 100.0, 50.0)
        (255, 0, 0)
        >>> hsl_to_rgb(0.0, 0.0, 100.0)
        (255, 255, 255)
    """
    h = (hue % HUE_MAX) / HUE_MAX
    s = clamp(saturation, 0.0, PERCENT_MAX) / PERCENT_MAX
    l = clamp(lightness, 0.0, PERCENT_MAX) / PERCENT_MAX

    if s == 0:
        v = clamp_channel(l * CHANNEL_MAX)
        return v, v, v

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    r = _hue_to_channel(p, q, h + 1 / 3)
    g = _hue_to_channel(p, q, h)
    b = _hue_to_channel(p, q, h - 1 / 3)

    return (
        clamp_channel(r * CHANNEL_MAX),
        clamp_channel(g * CHANNEL_MAX),
        clamp_channel(b * CHANNEL_MAX),
    )


# =============================================================================
# CMYK / GRAYSCALE → RGB
# =============================================================================


def cmyk_to_rgb(
    cyan: float, magenta: float, yellow: float, black: float
) -> tuple[int, int, int]:
    """
    Конверсия CMYK (проценты 0-100) → RGB.

    Формула не учитывает цветовой профиль документа (наивная конверсия).

    Examples:
        >>> cmyk_to_rgb(0, 0, 0, 0)
        (255, 255, 255)
        >>> cmyk_to_rgb(0, 0, 0, 100)
        (0, 0, 0)
        >>> cmyk_to_rgb(100, 0, 0, 0)
        (0, 255, 255)
    """
    key = 1 - black / PERCENT_MAX
    return (
        clamp_channel(CHANNEL_MAX * (1 - cyan / PERCENT_MAX) * key),
        clamp_channel(CHANNEL_MAX * (1 - magenta / PERCENT_MAX) * key),
        clamp_channel(CHANNEL_MAX * (1 - yellow / PERCENT_MAX) * key),
    )


def gray_to_rgb(gray: float) -> tuple[int, int, int]:
    """
    Конверсия оттенка серого (процент краски 0-100) → RGB.

    0% — белый (нет краски), 100% — чёрный.

    Examples:
        >>> gray_to_rgb(0)
        (255, 255, 255)
        >>> gray_to_rgb(100)
        (0, 0, 0)
    """
    v = clamp_channel(CHANNEL_MAX * (1 - gray / PERCENT_MAX))
    return v, v, v


# =============================================================================
# СМЕШИВАНИЕ С БЕЛЫМ
# =============================================================================


def blend_toward_white(
    red: float, green: float, blue: float, mix: float
) -> tuple[int, int, int]:
    """
    Линейное смешивание цвета с белым.

    mix = 1.0 → исходный цвет, mix = 0.0 → чистый белый.

    Args:
        red, green, blue: Исходные каналы (0-255)
        mix: Доля исходного цвета (вне [0, 1] → clamp)

    Returns:
        (red, green, blue) — целые в [0, 255]

    Examples:
        >>> blend_toward_white(200, 0, 0, 0.5)
        (228, 128, 128)
    """
    m = clamp(mix, 0.0, 1.0)
    white = CHANNEL_MAX * (1 - m)
    return (
        clamp_channel(red * m + white),
        clamp_channel(green * m + white),
        clamp_channel(blue * m + white),
    )
