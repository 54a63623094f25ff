"""
Errors — типизированные ошибки генератора лучей

Все ошибки детерминированы (ошибки валидации входа, не транзиентные):
повторные попытки бессмысленны. Ошибки пробрасываются вызывающему коду
(адаптеру), который решает: подставить значение по умолчанию или прервать
генерацию для цели.
"""


class StarburstError(Exception):
    """Базовая ошибка генератора."""


class UnsupportedColorKind(StarburstError):
    """
    Цвет обводки неизвестного вида.

    Возникает, когда конвертер встречает вариант, который не умеет
    интерпретировать (например, spot-цвет поверх grayscale).
    """


class MissingStroke(StarburstError):
    """Запрошено извлечение цвета у цели без обводки."""


class InvalidParameter(StarburstError, ValueError):
    """
    Невалидный параметр генерации.

    Отрицательный радиус, отрицательное количество лучей, min > max и т.п.
    Наследует ValueError для совместимости с обработчиками общего вида.
    """
