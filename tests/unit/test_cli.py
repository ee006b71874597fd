"""
Тесты для CLI bigprime

Проверяет:
1. Вердикты prime для сценарных входов (929, 930)
2. Чтение числа из stdin
3. add/sub вывод и JSON-вывод по контрактам
4. Коды возврата: 0 при вычисленном результате, 2 при некорректном вводе
"""

import argparse
import importlib
import io
import json

import pytest

cli_main = importlib.import_module("src.cli.main")
from src.cli.main import EXIT_INVALID_INPUT, EXIT_OK, PROMPT, _positive_int, build_parser, main
from src.core.contracts import (
    dump_primality_verdict,
    validate_arithmetic_result,
    validate_primality_verdict,
)


class TTYInput(io.StringIO):
    """stdin, притворяющийся терминалом."""

    def isatty(self) -> bool:
        return True


def run(argv, stdin_text: str = ""):
    """Запуск CLI с захватом потоков."""
    stdin = io.StringIO(stdin_text)
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = main(argv, stdin=stdin, stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


# =============================================================================
# ТЕСТЫ: prime
# =============================================================================


class TestPrimeCommand:
    """Команда prime."""

    def test_prime_number(self) -> None:
        code, out, _ = run(["prime", "929", "--seed", "1"])
        assert code == EXIT_OK
        assert out == "The number is probably prime.\n"

    def test_composite_number(self) -> None:
        code, out, _ = run(["prime", "930"])
        assert code == EXIT_OK
        assert out == "The number is composite.\n"

    def test_carmichael_number(self) -> None:
        code, out, _ = run(["prime", "561", "-k", "20", "--seed", "2"])
        assert code == EXIT_OK
        assert out == "The number is composite.\n"

    def test_large_prime(self) -> None:
        code, out, _ = run(["prime", str(2**127 - 1), "--seed", "3"])
        assert code == EXIT_OK
        assert out == "The number is probably prime.\n"

    def test_number_from_stdin(self) -> None:
        code, out, _ = run(["prime"], stdin_text="929\n")
        assert code == EXIT_OK
        assert out == "The number is probably prime.\n"

    def test_prompt_on_tty(self) -> None:
        stdout = io.StringIO()
        code = main(["prime"], stdin=TTYInput("930\n"), stdout=stdout, stderr=io.StringIO())
        assert code == EXIT_OK
        assert stdout.getvalue() == PROMPT + "The number is composite.\n"

    def test_empty_stdin_is_invalid(self) -> None:
        code, out, err = run(["prime"], stdin_text="")
        assert code == EXIT_INVALID_INPUT
        assert out == ""
        assert "invalid number" in err

    def test_malformed_number(self) -> None:
        code, out, err = run(["prime", "12x4"])
        assert code == EXIT_INVALID_INPUT
        assert out == ""
        assert "Invalid character 'x'" in err

    def test_json_output(self) -> None:
        code, out, _ = run(["--json", "prime", "929", "--seed", "4", "-k", "12"])
        assert code == EXIT_OK
        data = json.loads(out)
        validate_primality_verdict(data)
        assert data["verdict"] == "probably_prime"
        assert data["rounds_requested"] == 12
        assert data["error_bound_exponent"] == 12

    def test_show_limbs(self) -> None:
        code, _, err = run(["prime", "1" + "0" * 18 + "5", "--show-limbs"])
        assert code == EXIT_OK
        assert "limbs (most significant first): 1 5" in err

    def test_zero_rounds_rejected_by_parser(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["prime", "7", "-k", "0"])
        assert exc_info.value.code == 2

    def test_non_integer_rounds_error_is_not_chained(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="expected an integer") as exc_info:
            _positive_int("ten")
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__

    def test_json_output_goes_through_contract(self, monkeypatch) -> None:
        dumped = []

        def recording_dump(verdict):
            dumped.append(verdict)
            return dump_primality_verdict(verdict)

        monkeypatch.setattr(cli_main, "dump_primality_verdict", recording_dump)

        code, out, _ = run(["--json", "prime", "930"])
        assert code == EXIT_OK
        assert len(dumped) == 1
        assert json.loads(out)["verdict"] == "composite"


# =============================================================================
# ТЕСТЫ: add / sub
# =============================================================================


class TestArithmeticCommands:
    """Команды add и sub."""

    def test_add_carry(self) -> None:
        code, out, _ = run(["add", "9" * 19, "1"])
        assert code == EXIT_OK
        assert out == "1" + "0" * 19 + "\n"

    def test_sub(self) -> None:
        code, out, _ = run(["sub", "1" + "0" * 19, "1"])
        assert code == EXIT_OK
        assert out == "9" * 19 + "\n"

    def test_sub_precondition_violation(self) -> None:
        code, out, err = run(["sub", "1", "2"])
        assert code == EXIT_INVALID_INPUT
        assert out == ""
        assert "minuend >= subtrahend" in err

    def test_add_invalid_operand(self) -> None:
        code, _, err = run(["add", "1", ""])
        assert code == EXIT_INVALID_INPUT
        assert "Empty string" in err

    def test_json_output(self) -> None:
        code, out, _ = run(["--json", "sub", "100", "1"])
        assert code == EXIT_OK
        data = json.loads(out)
        validate_arithmetic_result(data)
        assert data == {
            "schema_version": "1",
            "operation": "sub",
            "left": "100",
            "right": "1",
            "result": "99",
        }
