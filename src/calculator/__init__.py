"""Calculator — REPL над римскими и арабскими числами.

- Scanner: разбор строки "<operand> <operator> <operand>"
- Calculator: цикл чтение-вычисление-печать
- main(): печать фатальной ошибки и код завершения
"""

from .calculator import Calculator, ReplResult, ReplStage
from .config import ReplConfig
from .scanner import ScannedLine, scan_line

__all__ = [
    "Calculator",
    "ReplResult",
    "ReplStage",
    "ReplConfig",
    "ScannedLine",
    "scan_line",
]
