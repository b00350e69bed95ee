"""
Errors — Иерархия ошибок ядра начисления наград

Все ошибки — локальные ошибки валидации входных данных. Они обнаруживаются
до начала арифметики, не ретраятся и пробрасываются вызывающему коду.

ВАЖНО: ошибки НЕ наследуют ValueError. Pydantic оборачивает ValueError из
валидаторов в ValidationError, а эти ошибки должны доходить до вызывающего
кода в исходном виде.
"""

from typing import Any


class RewardError(Exception):
    """Базовая ошибка ядра начисления наград."""


class InvalidAmount(RewardError):
    """
    Некорректное числовое значение: отрицательное, NaN/Inf, нечисловое.

    Attributes:
        field: Имя параметра, в котором обнаружена ошибка
        value: Исходное (невалидное) значение
    """

    def __init__(self, message: str, field: str = "amount", value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class UnknownCategory(RewardError):
    """Категория продукта отсутствует в таблице мультипликаторов."""


class UnknownScanType(RewardError):
    """Неизвестный тип скана."""
