"""
Numeral systems — конверсия между римской записью и целыми числами.
"""

from src.core.numerals.roman import (
    INT_TO_ROMAN_TABLE,
    ROMAN_NUMERALS,
    int_to_roman,
    is_roman_digit,
    roman_to_int,
)

__all__ = [
    "ROMAN_NUMERALS",
    "INT_TO_ROMAN_TABLE",
    "is_roman_digit",
    "roman_to_int",
    "int_to_roman",
]
