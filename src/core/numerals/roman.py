"""
Roman Numerals — Двунаправленная конверсия римских чисел

Алфавит: I, V, X, L, C, D, M (только верхний регистр).

roman_to_int:
- Один проход справа налево с отслеживанием наибольшей встреченной цифры
- Цифра меньше наибольшей → вычитается (IV, IX, XL, XC, CD, CM)
- Иначе → прибавляется и становится наибольшей

ВНИМАНИЕ: корректность записи НЕ проверяется. "IIII", "VX", "IC"
принимаются и дают числовое значение. Это известное ограничение,
поведение сохраняется намеренно.

int_to_roman:
- Жадное вычитание по убывающей таблице из 13 пар
- Для number <= 0 возвращается пустая строка (вызывающий код обязан
  проверить результат, см. Expression.evaluate)
"""

from types import MappingProxyType
from typing import Final, Mapping

from src.core.errors import InvalidRomanDigit


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

ROMAN_NUMERALS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }
)

# Порядок строк важен: жадный алгоритм идёт сверху вниз
INT_TO_ROMAN_TABLE: Final[tuple[tuple[int, str], ...]] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def is_roman_digit(letter: str) -> bool:
    """Является ли символ римской цифрой."""
    return letter in ROMAN_NUMERALS


def roman_to_int(s: str) -> int:
    """
    Конверсия: римское число → int

    Args:
        s: Строка римских цифр (например, "XIV")

    Returns:
        Целое значение (для пустой строки 0)

    Raises:
        InvalidRomanDigit: Если хотя бы один символ не римская цифра

    Examples:
        >>> roman_to_int("XIV")
        14
        >>> roman_to_int("MCMXCIV")
        1994
        >>> roman_to_int("IIII")  # некорректная запись принимается
        4
    """
    total = 0
    greatest = 0

    for letter in reversed(s):
        num = ROMAN_NUMERALS.get(letter)
        if num is None:
            raise InvalidRomanDigit(f"{letter} is not a roman number")

        if num < greatest:
            total -= num
            continue

        greatest = num
        total += num

    return total


def int_to_roman(number: int) -> str:
    """
    Конверсия: int → римское число

    Args:
        number: Целое число (осмысленно для number >= 1)

    Returns:
        Римская запись; пустая строка для number <= 0

    Examples:
        >>> int_to_roman(4)
        'IV'
        >>> int_to_roman(1994)
        'MCMXCIV'
        >>> int_to_roman(0)
        ''
    """
    digits: list[str] = []

    for value, digit in INT_TO_ROMAN_TABLE:
        while number >= value:
            digits.append(digit)
            number -= value

    return "".join(digits)
