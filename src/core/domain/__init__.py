"""
Domain models and value objects.

Contains the calculator entities: Operand, Operation registry, Expression.
"""

from src.core.domain.expression import EvaluationResult, Expression, new_expression
from src.core.domain.operand import NumeralSystem, Operand, new_operand, parse_arabic
from src.core.domain.operations import (
    STANDARD_OPERATIONS,
    Operation,
    Operator,
    truncating_divide,
)

__all__ = [
    # Operand model
    "NumeralSystem",
    "Operand",
    "new_operand",
    "parse_arabic",
    # Operation registry
    "Operation",
    "Operator",
    "STANDARD_OPERATIONS",
    "truncating_divide",
    # Expression model
    "Expression",
    "EvaluationResult",
    "new_expression",
]
