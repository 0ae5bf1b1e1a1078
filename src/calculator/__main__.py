"""Точка входа: python -m src.calculator (или консольная команда roman-calc)."""

import logging
import sys
from typing import Optional, TextIO

from src.calculator.calculator import Calculator
from src.calculator.config import LOG_FORMAT, LOG_LEVEL_DEFAULT, ReplConfig


logger = logging.getLogger(__name__)


def configure_logging(level: int = LOG_LEVEL_DEFAULT) -> None:
    """Логирование в stderr; stdout занят протоколом REPL."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def lift_int_digit_limit() -> None:
    """Снятие лимита длины int <-> str: целые операнды и результаты не ограничены."""
    sys.set_int_max_str_digits(0)


def main(
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
    error_stream: Optional[TextIO] = None,
    config: Optional[ReplConfig] = None
) -> int:
    """Единственный обработчик ошибок верхнего уровня.
    
    Returns:
        0 при конце ввода, 1 при любой ошибке
    """
    configure_logging()
    lift_int_digit_limit()
    
    config = config or ReplConfig()
    calculator = Calculator(config=config)
    
    result = calculator.repl(input_stream or sys.stdin, output_stream or sys.stdout)
    if result.ok:
        logger.debug("Session finished after %d line(s)", result.lines_evaluated)
        return 0
    
    print(f"{config.fatal_prefix}: {result.message}", file=error_stream or sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
