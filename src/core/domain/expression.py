"""
Expression — Бинарное выражение и его вычисление

Инварианты (проверяются при создании):
- оператор присутствует в реестре операций
- left.system == right.system (смешивание систем запрещено)

Вычисление:
- результат = operation(left.value, right.value)
- для ROMAN результат < 1 → NonRepresentableRomanResult
- для ARABIC ограничений нет (отрицательные числа допустимы)

Жизненный цикл: создаётся на каждую строку ввода, вычисляется один раз.
"""

from typing import Mapping

from pydantic import BaseModel, Field, model_validator

from src.core.domain.operand import NumeralSystem, Operand
from src.core.domain.operations import STANDARD_OPERATIONS, Operation
from src.core.errors import (
    MixedNumeralSystems,
    NonRepresentableRomanResult,
    UnsupportedOperator,
)
from src.core.numerals.roman import int_to_roman


# =============================================================================
# RESULT MODEL
# =============================================================================


class EvaluationResult(BaseModel):
    """Результат вычисления вместе с системой счисления для вывода."""

    value: int = Field(..., description="Целый результат операции")
    system: NumeralSystem = Field(..., description="Система счисления выражения")

    model_config = {"frozen": True}

    def render(self) -> str:
        """
        Строковое представление результата.

        Returns:
            Римская запись для ROMAN, десятичная со знаком для ARABIC
        """
        if self.system == NumeralSystem.ROMAN:
            return int_to_roman(self.value)
        return str(self.value)


# =============================================================================
# EXPRESSION MODEL
# =============================================================================


class Expression(BaseModel):
    """
    Выражение "<left> <operator> <right>".

    Immutable модель. Предпочтительный способ создания — new_expression(),
    который выдаёт типизированные ошибки до конструирования модели.
    """

    operator: str = Field(..., min_length=1, max_length=1, description="Символ оператора")
    operation: Operation = Field(..., exclude=True, description="Функция из реестра")
    left: Operand = Field(..., description="Левый операнд")
    right: Operand = Field(..., description="Правый операнд")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_same_system(self) -> "Expression":
        """Оба операнда должны быть из одной системы счисления."""
        if self.left.system != self.right.system:
            raise ValueError("operands from different numeric systems")
        return self

    @property
    def system(self) -> NumeralSystem:
        return self.left.system

    @property
    def is_roman(self) -> bool:
        return self.left.is_roman

    def evaluate(self) -> EvaluationResult:
        """
        Вычисление выражения.

        Returns:
            EvaluationResult

        Raises:
            NonRepresentableRomanResult: Римское выражение дало результат < 1
            DivisionByZero: Деление на ноль (из реестра операций)
        """
        result = self.operation(self.left.value, self.right.value)

        if self.is_roman and result < 1:
            raise NonRepresentableRomanResult(
                f"result of operation {result} cannot be expressed by roman letters"
            )

        return EvaluationResult(value=result, system=self.system)


def new_expression(
    operator: str,
    x: Operand,
    y: Operand,
    operations: Mapping[str, Operation] = STANDARD_OPERATIONS,
) -> Expression:
    """
    Создание выражения с проверкой оператора и систем счисления.

    Args:
        operator: Символ оператора (например, "+")
        x: Левый операнд
        y: Правый операнд
        operations: Реестр операций (по умолчанию STANDARD_OPERATIONS)

    Returns:
        Expression

    Raises:
        UnsupportedOperator: Оператора нет в реестре
        MixedNumeralSystems: x и y из разных систем счисления
    """
    operation = operations.get(operator)
    if operation is None:
        raise UnsupportedOperator("no such operator")

    if x.system != y.system:
        raise MixedNumeralSystems("operands from different numeric systems")

    return Expression(operator=operator, operation=operation, left=x, right=y)
