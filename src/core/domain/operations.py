"""
Operations — Реестр бинарных целочисленных операций

Фиксированная таблица "символ → функция", строится один раз при импорте
и доступна только на чтение (MappingProxyType):
- "+" → сложение
- "-" → вычитание
- "*" → умножение
- "/" → целочисленное деление с усечением к нулю

Деление усекает к нулю (-7 / 2 == -3), а не округляет вниз как "//".
"""

import operator
from enum import Enum
from types import MappingProxyType
from typing import Callable, Final, Mapping

from src.core.errors import DivisionByZero


Operation = Callable[[int, int], int]


class Operator(str, Enum):
    """Поддерживаемые операторы"""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


def truncating_divide(x: int, y: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Raises:
        DivisionByZero: Если y == 0

    Examples:
        >>> truncating_divide(7, 2)
        3
        >>> truncating_divide(-7, 2)
        -3
    """
    if y == 0:
        raise DivisionByZero("integer divide by zero")

    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        return -quotient
    return quotient


STANDARD_OPERATIONS: Final[Mapping[str, Operation]] = MappingProxyType(
    {
        Operator.ADD.value: operator.add,
        Operator.SUBTRACT.value: operator.sub,
        Operator.MULTIPLY.value: operator.mul,
        Operator.DIVIDE.value: truncating_divide,
    }
)
