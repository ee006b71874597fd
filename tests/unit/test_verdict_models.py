"""
Tests for Pydantic Result Models

Покрывает:
- PrimalityVerdict: построение из PrimalityResult, согласованность полей
- ArithmeticResult: построение из BigInt операндов
- Immutability (frozen=True)
- JSON сериализация
"""

import random

import pytest
from pydantic import ValidationError

from src.core.domain import (
    VERDICT_MESSAGES,
    ArithmeticOperation,
    ArithmeticResult,
    PrimalityVerdict,
    Verdict,
)
from src.core.math import MillerRabinConfig, MillerRabinTester, add, from_int, parse, sub


@pytest.fixture
def tester() -> MillerRabinTester:
    return MillerRabinTester(MillerRabinConfig(rounds=8), random.Random(99))


@pytest.fixture
def valid_verdict_data():
    """Валидные данные вердикта."""
    return {
        "number": "929",
        "rounds_requested": 10,
        "rounds_run": 10,
        "verdict": "probably_prime",
        "message": "The number is probably prime.",
        "witness": None,
        "error_bound_exponent": 10,
    }


# =============================================================================
# VERDICT ENUM
# =============================================================================


class TestVerdictEnum:
    """Verdict и канонические строки вывода."""

    def test_messages(self) -> None:
        assert Verdict.PROBABLY_PRIME.message == "The number is probably prime."
        assert Verdict.COMPOSITE.message == "The number is composite."

    def test_every_verdict_has_message(self) -> None:
        assert set(VERDICT_MESSAGES) == set(Verdict)

    def test_string_values(self) -> None:
        assert Verdict("composite") is Verdict.COMPOSITE


# =============================================================================
# PRIMALITY VERDICT
# =============================================================================


class TestPrimalityVerdict:
    """PrimalityVerdict модель."""

    def test_valid_creation(self, valid_verdict_data) -> None:
        verdict = PrimalityVerdict(**valid_verdict_data)
        assert verdict.schema_version == "1"
        assert verdict.verdict == Verdict.PROBABLY_PRIME

    def test_from_prime_result(self, tester: MillerRabinTester) -> None:
        n = parse("929")
        verdict = PrimalityVerdict.from_result(n, tester.evaluate(n))
        assert verdict.number == "929"
        assert verdict.verdict == Verdict.PROBABLY_PRIME
        assert verdict.message == "The number is probably prime."
        assert verdict.rounds_run == 8
        assert verdict.error_bound_exponent == 8
        assert verdict.witness is None

    def test_from_composite_result(self, tester: MillerRabinTester) -> None:
        n = from_int(561)
        verdict = PrimalityVerdict.from_result(n, tester.evaluate(n))
        assert verdict.verdict == Verdict.COMPOSITE
        assert verdict.message == "The number is composite."
        assert verdict.witness is not None
        assert verdict.error_bound_exponent is None

    def test_from_fast_path_result(self, tester: MillerRabinTester) -> None:
        """Fast path: ответ точный, граница ошибки не задаётся."""
        for text, expected in (("2", Verdict.PROBABLY_PRIME), ("930", Verdict.COMPOSITE)):
            n = parse(text)
            verdict = PrimalityVerdict.from_result(n, tester.evaluate(n))
            assert verdict.verdict == expected
            assert verdict.rounds_run == 0
            assert verdict.error_bound_exponent is None

    def test_rounds_run_exceeding_requested_rejected(self, valid_verdict_data) -> None:
        valid_verdict_data["rounds_run"] = 11
        with pytest.raises(ValidationError, match="exceeds rounds_requested"):
            PrimalityVerdict(**valid_verdict_data)

    def test_witness_on_prime_rejected(self, valid_verdict_data) -> None:
        valid_verdict_data["witness"] = "2"
        with pytest.raises(ValidationError, match="witness is only defined"):
            PrimalityVerdict(**valid_verdict_data)

    def test_mismatched_message_rejected(self, valid_verdict_data) -> None:
        valid_verdict_data["message"] = "The number is composite."
        with pytest.raises(ValidationError, match="does not match verdict"):
            PrimalityVerdict(**valid_verdict_data)

    def test_non_decimal_number_rejected(self, valid_verdict_data) -> None:
        valid_verdict_data["number"] = "-929"
        with pytest.raises(ValidationError):
            PrimalityVerdict(**valid_verdict_data)

    def test_zero_rounds_requested_rejected(self, valid_verdict_data) -> None:
        valid_verdict_data["rounds_requested"] = 0
        with pytest.raises(ValidationError):
            PrimalityVerdict(**valid_verdict_data)

    def test_immutability(self, valid_verdict_data) -> None:
        verdict = PrimalityVerdict(**valid_verdict_data)
        with pytest.raises(ValidationError):
            verdict.number = "930"  # type: ignore[misc]

    def test_json_round_trip(self, valid_verdict_data) -> None:
        verdict = PrimalityVerdict(**valid_verdict_data)
        restored = PrimalityVerdict.model_validate_json(verdict.model_dump_json())
        assert restored == verdict


# =============================================================================
# ARITHMETIC RESULT
# =============================================================================


class TestArithmeticResult:
    """ArithmeticResult модель."""

    def test_build_add(self) -> None:
        left, right = parse("9" * 19), parse("1")
        outcome = ArithmeticResult.build(ArithmeticOperation.ADD, left, right, add(left, right))
        assert outcome.operation == ArithmeticOperation.ADD
        assert outcome.left == "9" * 19
        assert outcome.right == "1"
        assert outcome.result == "1" + "0" * 19

    def test_build_sub(self) -> None:
        left, right = parse("1" + "0" * 19), parse("1")
        outcome = ArithmeticResult.build(ArithmeticOperation.SUB, left, right, sub(left, right))
        assert outcome.result == "9" * 19

    def test_dump_uses_enum_values(self) -> None:
        left, right = parse("2"), parse("3")
        outcome = ArithmeticResult.build(ArithmeticOperation.ADD, left, right, add(left, right))
        assert outcome.model_dump(mode="json") == {
            "schema_version": "1",
            "operation": "add",
            "left": "2",
            "right": "3",
            "result": "5",
        }

    def test_invalid_operation_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ArithmeticResult(operation="mul", left="2", right="3", result="6")

    def test_immutability(self) -> None:
        outcome = ArithmeticResult(operation="add", left="2", right="3", result="5")
        with pytest.raises(ValidationError):
            outcome.result = "6"  # type: ignore[misc]
