"""
Errors — Таксономия ошибок калькулятора

Каждая ошибка фатальна для сессии: локального восстановления нет,
первая ошибка на любой строке завершает работу REPL.

Иерархия:
- CalculatorError (база, несёт ErrorKind)
  - InputFormatError — строка не соответствует "<operand> <op> <operand>"
  - InvalidRomanDigit — символ вне алфавита {I,V,X,L,C,D,M}
  - InvalidOperand — токен не является ни арабским, ни римским числом
  - UnsupportedOperator — оператора нет в реестре
  - MixedNumeralSystems — операнды из разных систем счисления
  - NonRepresentableRomanResult — римский результат < 1
  - DivisionByZero — деление на ноль
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Вид ошибки (явно выводится на границе REPL)"""

    INPUT_FORMAT = "input_format"
    INVALID_ROMAN_DIGIT = "invalid_roman_digit"
    INVALID_OPERAND = "invalid_operand"
    UNSUPPORTED_OPERATOR = "unsupported_operator"
    MIXED_NUMERAL_SYSTEMS = "mixed_numeral_systems"
    NON_REPRESENTABLE_ROMAN_RESULT = "non_representable_roman_result"
    DIVISION_BY_ZERO = "division_by_zero"


class CalculatorError(Exception):
    """Базовая ошибка калькулятора."""

    kind: ErrorKind


class InputFormatError(CalculatorError):
    """Строка ввода не разбирается как тройка операнд/оператор/операнд."""

    kind = ErrorKind.INPUT_FORMAT


class InvalidRomanDigit(CalculatorError):
    """Символ не является римской цифрой."""

    kind = ErrorKind.INVALID_ROMAN_DIGIT


class InvalidOperand(CalculatorError):
    kind = ErrorKind.INVALID_OPERAND


class UnsupportedOperator(CalculatorError):
    kind = ErrorKind.UNSUPPORTED_OPERATOR


class MixedNumeralSystems(CalculatorError):
    """Операнды выражения записаны в разных системах счисления."""

    kind = ErrorKind.MIXED_NUMERAL_SYSTEMS


class NonRepresentableRomanResult(CalculatorError):
    """
    Результат римского выражения < 1.

    Для нуля и отрицательных чисел римской записи не существует.
    """

    kind = ErrorKind.NON_REPRESENTABLE_ROMAN_RESULT


class DivisionByZero(CalculatorError):
    kind = ErrorKind.DIVISION_BY_ZERO
