"""
Operand — Модель операнда выражения

Операнд — tagged union: целое значение + система счисления (ARABIC | ROMAN).
value всегда хранит целую величину независимо от исходной записи.

Политика разбора токена (new_operand):
1. Сначала римская запись (roman_to_int)
2. При неудаче — арабское целое ([+-]?[0-9]+)
3. Иначе → InvalidOperand
"""

import re
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

from src.core.errors import InvalidOperand, InvalidRomanDigit
from src.core.numerals.roman import roman_to_int


# Знак + ASCII цифры, ведущие нули допустимы
ARABIC_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# ENUMS
# =============================================================================


class NumeralSystem(str, Enum):
    """Система счисления операнда"""

    ARABIC = "arabic"
    ROMAN = "roman"


# =============================================================================
# OPERAND MODEL
# =============================================================================


class Operand(BaseModel):
    """
    Операнд выражения.

    Immutable модель (frozen=True): создаётся разбором токена и не меняется.
    """

    value: int = Field(..., description="Целое значение операнда")
    system: NumeralSystem = Field(..., description="Система счисления исходной записи")

    model_config = {"frozen": True}

    @classmethod
    def arabic(cls, value: int) -> "Operand":
        return cls(value=value, system=NumeralSystem.ARABIC)

    @classmethod
    def roman(cls, value: int) -> "Operand":
        return cls(value=value, system=NumeralSystem.ROMAN)

    @property
    def is_roman(self) -> bool:
        return self.system == NumeralSystem.ROMAN


def parse_arabic(token: str) -> int:
    """
    Разбор арабского целого.

    int() сам по себе шире нужного (пробелы, "_", не-ASCII цифры),
    поэтому токен сначала проверяется шаблоном.

    Raises:
        InvalidOperand: Если токен не является целым числом
            или превышает лимит длины целого интерпретатора
    """
    if ARABIC_INTEGER_PATTERN.fullmatch(token) is None:
        raise InvalidOperand("not an arabic or roman integer number")

    # Лимит длины int(str) интерпретатора (sys.set_int_max_str_digits)
    try:
        return int(token)
    except ValueError as e:
        raise InvalidOperand("not an arabic or roman integer number") from e


def new_operand(token: str) -> Operand:
    """
    Создание операнда из токена ввода.

    Args:
        token: Токен (например, "XIV", "42", "-7")

    Returns:
        Operand с тегом системы счисления

    Raises:
        InvalidOperand: Если токен не римское и не арабское целое
            (например, "2.5", "ii", "1X")
    """
    try:
        return Operand.roman(roman_to_int(token))
    except InvalidRomanDigit:
        pass

    return Operand.arabic(parse_arabic(token))
