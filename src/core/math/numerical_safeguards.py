"""
Numerical Safeguards — безопасные числовые примитивы

Модуль обеспечивает численную устойчивость генерации и конверсии цветов:
- Проверка NaN/Inf, чтобы невалидные значения не попадали в геометрию и цвет
- Ограничение (clamp) и округление каналов цвета
- Валидация параметров генерации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каналы RGB после любой операции всегда в [0, 255]
2. NaN/Inf никогда не проходят валидацию
3. Округление каналов — round half up (x.5 → вверх), никогда banker's rounding
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from src.core.errors import InvalidParameter

# =============================================================================
# ГРАНИЦЫ КАНАЛА RGB
# =============================================================================

CHANNEL_MIN: Final[int] = 0
CHANNEL_MAX: Final[int] = 255


# =============================================================================
# NaN/Inf ПРОВЕРКА
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, что значение является валидным float (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОКРУГЛЕНИЕ И CLAMP
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до ближайшего целого, x.5 округляется вверх.

    Встроенный round() использует banker's rounding (round(2.5) == 2),
    что даёт расхождение на 1 в каналах цвета. Здесь 2.5 → 3, -2.5 → -2.

    Args:
        value: Значение для округления

    Returns:
        Округлённое целое

    Raises:
        InvalidParameter: Если value NaN/Inf

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(127.49)
        127
        >>> round_half_up(-0.5)
        0
    """
    if not is_valid_float(value):
        raise InvalidParameter(f"Cannot round non-finite value: {value}")
    return int(math.floor(value + 0.5))


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(300.0, 0.0, 255.0)
        255.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_channel(value: float) -> int:
    """
    Нормализация канала цвета: clamp в [0, 255], затем round half up.

    NaN/Inf заменяются на 0 (отсутствие компоненты цвета).

    Examples:
        >>> clamp_channel(-12.0)
        0
        >>> clamp_channel(254.5)
        255
        >>> clamp_channel(1e6)
        255
    """
    if not is_valid_float(value):
        value = 0.0
    return round_half_up(clamp(value, float(CHANNEL_MIN), float(CHANNEL_MAX)))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidParameter: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidParameter(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise InvalidParameter(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        InvalidParameter: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidParameter(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise InvalidParameter(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise InvalidParameter(f"{name} must be <= {max_value}, got {value}")


def validate_count(value: int, name: str, max_value: int | None = None) -> None:
    """
    Валидация целочисленного счётчика (количество лучей и т.п.).

    bool отклоняется явно: True/False не являются счётчиком.

    Raises:
        InvalidParameter: Если value не int, отрицательный или больше max_value
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise InvalidParameter(f"{name} must be non-negative, got {value}")

    if max_value is not None and value > max_value:
        raise InvalidParameter(f"{name} must be <= {max_value}, got {value}")
