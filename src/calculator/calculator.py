"""Calculator — REPL над арифметическими выражениями.

Цикл:
1. Печать приглашения ("input:")
2. Чтение строки; конец ввода → "exit", успешное завершение
3. Разбор операндов (римские или арабские)
4. Создание выражения (оператор из реестра, единая система счисления)
5. Вычисление и печать результата в системе счисления операндов

Любая ошибка фатальна: цикл останавливается на первой же ошибке,
ошибка возвращается в ReplResult вместе со стадией, на которой возникла.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, TextIO

from src.calculator.config import ReplConfig
from src.calculator.scanner import scan_line
from src.core.domain.expression import EvaluationResult, Expression, new_expression
from src.core.domain.operand import Operand, new_operand
from src.core.domain.operations import STANDARD_OPERATIONS, Operation
from src.core.errors import CalculatorError, ErrorKind


logger = logging.getLogger(__name__)


class ReplStage(str, Enum):
    """Стадия обработки строки (префикс сообщения об ошибке)."""
    INPUT = "bad input"
    OPERAND = "bad operand"
    EXPRESSION = "bad expression"
    EVALUATION = "bad evaluation"


@dataclass(frozen=True)
class ReplResult:
    """Результат сессии REPL."""
    
    ok: bool
    lines_evaluated: int
    
    # Заполнены только при ошибке
    stage: Optional[ReplStage] = None
    error: Optional[CalculatorError] = None
    
    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None
    
    @property
    def message(self) -> str:
        """Сообщение вида "<stage>: <error>" (пустое при успехе)."""
        if self.ok:
            return ""
        return f"{self.stage.value}: {self.error}"


class _StageFailure(Exception):
    """Ошибка калькулятора с привязкой к стадии (внутренняя)."""
    
    def __init__(self, stage: ReplStage, error: CalculatorError):
        super().__init__(f"{stage.value}: {error}")
        self.stage = stage
        self.error = error


class Calculator:
    """Калькулятор с фиксированным реестром операций.
    
    Реестр передаётся при создании и только читается.
    """
    
    def __init__(
        self,
        operations: Mapping[str, Operation] = STANDARD_OPERATIONS,
        config: Optional[ReplConfig] = None
    ):
        """
        Args:
            operations: реестр "символ → операция"
            config: тексты протокола REPL
        """
        self.operations = operations
        self.config = config or ReplConfig()
    
    def new_expression(self, operator: str, x: Operand, y: Operand) -> Expression:
        """Создание выражения по реестру этого калькулятора."""
        return new_expression(operator, x, y, self.operations)
    
    def evaluate_line(self, line: str) -> EvaluationResult:
        """Обработка одной строки ввода.
        
        Raises:
            _StageFailure: ошибка с указанием стадии
        """
        try:
            scanned = scan_line(line)
        except CalculatorError as e:
            raise _StageFailure(ReplStage.INPUT, e) from e
        
        try:
            x = new_operand(scanned.left)
            y = new_operand(scanned.right)
        except CalculatorError as e:
            raise _StageFailure(ReplStage.OPERAND, e) from e
        
        try:
            expression = self.new_expression(scanned.operator, x, y)
        except CalculatorError as e:
            raise _StageFailure(ReplStage.EXPRESSION, e) from e
        
        try:
            return expression.evaluate()
        except CalculatorError as e:
            raise _StageFailure(ReplStage.EVALUATION, e) from e
    
    def repl(self, input_stream: TextIO, output_stream: TextIO) -> ReplResult:
        """Цикл чтение-вычисление-печать до конца ввода или первой ошибки.
        
        Args:
            input_stream: источник строк (stdin)
            output_stream: приёмник вывода (stdout)
        
        Returns:
            ReplResult: ok=True при конце ввода, иначе стадия и ошибка
        """
        lines_evaluated = 0
        
        while True:
            print(self.config.prompt, file=output_stream)
            
            line = input_stream.readline()
            if line == "":
                break
            
            try:
                result = self.evaluate_line(line)
            except _StageFailure as failure:
                logger.info("Session aborted after %d line(s): %s", lines_evaluated, failure)
                return ReplResult(
                    ok=False,
                    lines_evaluated=lines_evaluated,
                    stage=failure.stage,
                    error=failure.error
                )
            
            lines_evaluated += 1
            rendered = result.render()
            logger.debug("Evaluated %r -> %s (%s)", line.rstrip("\n"), rendered, result.system.value)
            
            print(self.config.output_header, file=output_stream)
            print(rendered, file=output_stream)
        
        print(self.config.exit_message, file=output_stream)
        
        return ReplResult(ok=True, lines_evaluated=lines_evaluated)
