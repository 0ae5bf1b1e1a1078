"""Unit тесты для Calculator REPL и точки входа.

Coverage:
- Сценарии end-to-end (арабские и римские операнды)
- Протокол вывода: "input:", "output:", "exit"
- Остановка на первой ошибке со стадией и видом ошибки
- main(): код завершения и сообщение "fatal error: ..." в stderr
- Внедрённый реестр операций и конфигурация
"""

import io
import sys

import pytest

from src.calculator import Calculator, ReplConfig, ReplResult, ReplStage
from src.calculator.__main__ import main
from src.core.errors import ErrorKind


@pytest.fixture
def calculator():
    """Fixture для калькулятора со стандартным реестром."""
    return Calculator()


def run(calculator, text):
    """Прогон REPL на строке ввода; возвращает (result, stdout)."""
    output = io.StringIO()
    result = calculator.repl(io.StringIO(text), output)
    return result, output.getvalue()


# =============================================================================
# PASS SCENARIOS
# =============================================================================


@pytest.mark.parametrize(
    "line,expected",
    [
        # basic
        ("2 + 2", "4"),
        ("II + II", "IV"),
        ("2 - 1", "1"),
        ("II - I", "I"),
        ("2 * 2", "4"),
        ("II * II", "IV"),
        ("2 / 2", "1"),
        ("II / II", "I"),
        # extra
        ("X * X", "C"),
        ("1 - 1", "0"),
        ("3 - 10", "-7"),
        ("-7 / 2", "-3"),
        ("MCM + XCIV", "MCMXCIV"),
    ],
)
def test_single_line(calculator, line, expected):
    """PASS: одна строка → результат в системе счисления операндов."""
    result, stdout = run(calculator, f"{line}\n")
    
    assert result.ok is True
    assert result.lines_evaluated == 1
    assert stdout == f"input:\noutput:\n{expected}\ninput:\nexit\n"


def test_empty_input_exits_cleanly(calculator):
    """Конец ввода сразу → "exit"."""
    result, stdout = run(calculator, "")
    
    assert result == ReplResult(ok=True, lines_evaluated=0)
    assert result.message == ""
    assert result.error_kind is None
    assert stdout == "input:\nexit\n"


def test_multiple_lines(calculator):
    """Цикл продолжается до конца ввода."""
    result, stdout = run(calculator, "2 + 2\nV * II\n10 / 3")
    
    assert result.ok is True
    assert result.lines_evaluated == 3
    assert stdout == (
        "input:\noutput:\n4\n"
        "input:\noutput:\nX\n"
        "input:\noutput:\n3\n"
        "input:\nexit\n"
    )


# =============================================================================
# FAIL SCENARIOS
# =============================================================================


@pytest.mark.parametrize(
    "line,stage,kind,message",
    [
        ("2 + 2 2", ReplStage.INPUT, ErrorKind.INPUT_FORMAT, "bad input: expected newline"),
        ("", ReplStage.INPUT, ErrorKind.INPUT_FORMAT, "bad input: unexpected newline"),
        (
            "2.5 + 2",
            ReplStage.OPERAND,
            ErrorKind.INVALID_OPERAND,
            "bad operand: not an arabic or roman integer number",
        ),
        (
            "2 + ii",
            ReplStage.OPERAND,
            ErrorKind.INVALID_OPERAND,
            "bad operand: not an arabic or roman integer number",
        ),
        ("2 % 2", ReplStage.EXPRESSION, ErrorKind.UNSUPPORTED_OPERATOR, "bad expression: no such operator"),
        (
            "2 + II",
            ReplStage.EXPRESSION,
            ErrorKind.MIXED_NUMERAL_SYSTEMS,
            "bad expression: operands from different numeric systems",
        ),
        (
            "I - I",
            ReplStage.EVALUATION,
            ErrorKind.NON_REPRESENTABLE_ROMAN_RESULT,
            "bad evaluation: result of operation 0 cannot be expressed by roman letters",
        ),
        ("1 / 0", ReplStage.EVALUATION, ErrorKind.DIVISION_BY_ZERO, "bad evaluation: integer divide by zero"),
    ],
)
def test_failure_stops_session(calculator, line, stage, kind, message):
    """FAIL: первая ошибка завершает сессию, вывода результата нет."""
    result, stdout = run(calculator, f"{line}\n4 + 4\n")
    
    assert result.ok is False
    assert result.lines_evaluated == 0
    assert result.stage == stage
    assert result.error_kind == kind
    assert result.message == message
    assert stdout == "input:\n"


def test_failure_after_successful_lines(calculator):
    """Уже напечатанные результаты остаются, сессия обрывается."""
    result, stdout = run(calculator, "2 + 2\nI - I\nII + II\n")
    
    assert result.ok is False
    assert result.lines_evaluated == 1
    assert result.stage == ReplStage.EVALUATION
    assert stdout == "input:\noutput:\n4\ninput:\n"
    assert "exit" not in stdout


# =============================================================================
# INJECTED REGISTRY / CONFIG
# =============================================================================


def test_custom_operations():
    """Калькулятор использует переданный реестр."""
    calculator = Calculator(operations={"^": lambda x, y: x ** y})
    
    result, stdout = run(calculator, "II ^ III\n2 + 2\n")
    
    assert stdout == "input:\noutput:\nVIII\ninput:\n"
    assert result.stage == ReplStage.EXPRESSION
    assert result.error_kind == ErrorKind.UNSUPPORTED_OPERATOR


def test_custom_config():
    config = ReplConfig(prompt=">", output_header="=", exit_message="bye")
    calculator = Calculator(config=config)
    
    _, stdout = run(calculator, "X + X\n")
    
    assert stdout == ">\n=\nXX\n>\nbye\n"


def test_failure_logged(calculator, caplog):
    """Ошибка сессии логируется с уровнем INFO."""
    with caplog.at_level("INFO", logger="src.calculator.calculator"):
        run(calculator, "2 + II\n")
    
    assert "bad expression: operands from different numeric systems" in caplog.text


# =============================================================================
# ENTRY POINT
# =============================================================================


def test_main_success():
    """main(): конец ввода → код 0, stderr пуст."""
    stdout, stderr = io.StringIO(), io.StringIO()
    
    code = main(io.StringIO("2 + 2\nII + II\n"), stdout, stderr)
    
    assert code == 0
    assert stdout.getvalue() == "input:\noutput:\n4\ninput:\noutput:\nIV\ninput:\nexit\n"
    assert stderr.getvalue() == ""


def test_main_fatal_error():
    """main(): ошибка → код 1 и "fatal error: <stage>: <error>" в stderr."""
    stdout, stderr = io.StringIO(), io.StringIO()
    
    code = main(io.StringIO("2.5 + 2\n"), stdout, stderr)
    
    assert code == 1
    assert stdout.getvalue() == "input:\n"
    assert stderr.getvalue() == "fatal error: bad operand: not an arabic or roman integer number\n"


def test_main_uses_standard_streams(monkeypatch, capsys):
    """main() без аргументов читает stdin и пишет в stdout/stderr."""
    monkeypatch.setattr("sys.stdin", io.StringIO("X * X\n"))
    
    code = main()
    
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "input:\noutput:\nC\ninput:\nexit\n"


@pytest.fixture
def restore_int_digit_limit():
    """main() снимает лимит длины int <-> str для всего процесса."""
    previous = sys.get_int_max_str_digits()
    yield
    sys.set_int_max_str_digits(previous)


def test_main_long_arabic_operand(restore_int_digit_limit):
    """main(): операнд длиннее лимита интерпретатора вычисляется."""
    stdout, stderr = io.StringIO(), io.StringIO()
    
    code = main(io.StringIO("1" * 5000 + " + 1\n"), stdout, stderr)
    
    assert code == 0
    assert stdout.getvalue() == f"input:\noutput:\n{'1' * 4999}2\ninput:\nexit\n"
    assert stderr.getvalue() == ""


def test_main_long_arabic_result(restore_int_digit_limit):
    """main(): результат длиннее лимита интерпретатора печатается целиком."""
    stdout, stderr = io.StringIO(), io.StringIO()
    operand = "9" * 3000
    
    code = main(io.StringIO(f"{operand} * {operand}\n"), stdout, stderr)
    
    lines = stdout.getvalue().splitlines()
    assert code == 0
    assert lines[:2] == ["input:", "output:"]
    assert len(lines[2]) == 6000
    assert lines[2] == "9" * 2999 + "8" + "0" * 2999 + "1"
    assert lines[3:] == ["input:", "exit"]
    assert stderr.getvalue() == ""
