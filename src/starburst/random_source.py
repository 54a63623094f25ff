"""
RandomSource — последовательный поток случайных чисел

Единственный разделяемый ресурс генерации. Порядок потребления фиксирован
(угол → радиус → цвет для каждого луча), поэтому подмена источника на
seeded / детерминированный даёт воспроизводимый результат.
"""

import random
from typing import Iterable, Optional, Protocol, runtime_checkable

from src.core.errors import InvalidParameter


@runtime_checkable
class RandomSource(Protocol):
    """Источник float в [0, 1)."""

    def next_float(self) -> float:
        ...


class SystemRandomSource:
    """
    RandomSource поверх random.Random.

    Args:
        seed: Seed для воспроизводимости (None — из системной энтропии)
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_float(self) -> float:
        return self._rng.random()


class SequenceRandomSource:
    """
    RandomSource, воспроизводящий заранее заданные значения.

    Для тестов и сценариев "что будет при u = ...".

    Raises:
        InvalidParameter: При значении вне [0, 1] или исчерпании последовательности
    """

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        for v in self._values:
            if not 0.0 <= v <= 1.0:
                raise InvalidParameter(f"random value must be in [0, 1], got {v}")
        self._pos = 0

    def next_float(self) -> float:
        if self._pos >= len(self._values):
            raise InvalidParameter(
                f"random sequence exhausted after {len(self._values)} draws"
            )
        value = self._values[self._pos]
        self._pos += 1
        return value

    @property
    def consumed(self) -> int:
        """Сколько значений уже выдано."""
        return self._pos
