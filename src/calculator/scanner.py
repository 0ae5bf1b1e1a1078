"""Scanner — разбор строки ввода "<operand> <operator> <operand>".

Правила:
- ведущие пробелы пропускаются
- операнд — непрерывная последовательность непробельных символов
- оператор — ровно один символ, отделён от левого операнда пробелами
  (пробелы после оператора необязательны)
- хвостовые пробелы и "\\r" допустимы
"""

import re
from typing import Final, NamedTuple

from src.core.errors import InputFormatError


LINE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[ \t]*(?P<left>\S+)[ \t]+(?P<operator>\S)[ \t]*(?P<right>\S+)[ \t]*\r?"
)


class ScannedLine(NamedTuple):
    """Токены одной строки ввода."""

    left: str
    operator: str
    right: str


def scan_line(line: str) -> ScannedLine:
    """Разбор одной строки (с "\\n" в конце или без).

    Args:
        line: строка, прочитанная из входного потока

    Returns:
        ScannedLine с тремя токенами

    Raises:
        InputFormatError: строка пустая, неполная или содержит лишнее
    """
    has_newline = line.endswith("\n")
    text = line[:-1] if has_newline else line

    match = LINE_PATTERN.fullmatch(text)
    if match is not None:
        return ScannedLine(match["left"], match["operator"], match["right"])

    if len(text.split()) < 3:
        # Последняя строка без "\n" оборвана концом ввода
        raise InputFormatError("unexpected newline" if has_newline else "unexpected EOF")
    raise InputFormatError("expected newline")
