"""Конфигурация REPL калькулятора."""

import logging
from dataclasses import dataclass
from typing import Final


LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_DEFAULT: Final[int] = logging.WARNING


@dataclass(frozen=True)
class ReplConfig:
    """Тексты, которые REPL печатает в stdout/stderr.

    Значения по умолчанию образуют внешний протокол:
    - "input:" перед каждым чтением строки
    - "output:" и результат после успешного вычисления
    - "exit" при конце ввода
    - "fatal error: ..." в stderr при ошибке
    """
    prompt: str = "input:"
    output_header: str = "output:"
    exit_message: str = "exit"
    fatal_prefix: str = "fatal error"
