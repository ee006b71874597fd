"""
Verdict — Модели результатов вычислений для внешнего вывода

Immutable Pydantic модели, представляющие результат проверки простоты
и результат арифметической операции. Полная совместимость с JSON Schema
(contracts/schema/primality_verdict.json, contracts/schema/arithmetic_result.json).

Все числа сериализуются как десятичные строки: JSON number не вмещает
произвольную точность.
"""

from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.math.bigint import BigInt, render
from src.core.math.primality import PrimalityResult

PRIMALITY_SCHEMA_VERSION: Final[str] = "1"
ARITHMETIC_SCHEMA_VERSION: Final[str] = "1"

_DECIMAL_PATTERN: Final[str] = "^[0-9]+$"


# =============================================================================
# ENUMS
# =============================================================================


class Verdict(str, Enum):
    """Вердикт теста простоты."""

    PROBABLY_PRIME = "probably_prime"
    COMPOSITE = "composite"

    @property
    def message(self) -> str:
        """Каноническая строка вывода для консоли."""
        return VERDICT_MESSAGES[self]


VERDICT_MESSAGES: Final[dict] = {
    Verdict.PROBABLY_PRIME: "The number is probably prime.",
    Verdict.COMPOSITE: "The number is composite.",
}


class ArithmeticOperation(str, Enum):
    """Арифметическая операция над BigInt."""

    ADD = "add"
    SUB = "sub"


# =============================================================================
# PRIMALITY VERDICT
# =============================================================================


class PrimalityVerdict(BaseModel):
    """
    Результат проверки простоты для внешнего вывода.

    Immutable модель (frozen=True).
    error_bound_exponent = k означает P(ошибка) ≤ 4^(−k); None — ответ
    точный (fast path или найден witness составности).
    """

    schema_version: str = Field(
        PRIMALITY_SCHEMA_VERSION, pattern="^1$", description="Версия схемы"
    )
    number: str = Field(..., pattern=_DECIMAL_PATTERN, description="Проверяемое число")
    rounds_requested: int = Field(..., ge=1, description="Запрошенное число раундов k")
    rounds_run: int = Field(..., ge=0, description="Фактически выполненные раунды")
    verdict: Verdict = Field(..., description="probably_prime / composite")
    message: str = Field(..., min_length=1, description="Строка вывода для консоли")
    witness: Optional[str] = Field(
        None, pattern=_DECIMAL_PATTERN, description="Witness составности (nullable)"
    )
    error_bound_exponent: Optional[int] = Field(
        None, ge=1, description="k в границе ошибки 4^-k (nullable)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "PrimalityVerdict":
        """
        Согласованность полей.

        - rounds_run ≤ rounds_requested
        - witness допустим только при composite
        - message соответствует verdict
        """
        if self.rounds_run > self.rounds_requested:
            raise ValueError(
                f"rounds_run {self.rounds_run} exceeds rounds_requested {self.rounds_requested}"
            )

        if self.witness is not None and self.verdict != Verdict.COMPOSITE:
            raise ValueError("witness is only defined for a composite verdict")

        if self.message != self.verdict.message:
            raise ValueError(f"message {self.message!r} does not match verdict {self.verdict.value}")

        return self

    @classmethod
    def from_result(cls, number: BigInt, result: PrimalityResult) -> "PrimalityVerdict":
        """
        Построение вердикта из PrimalityResult.

        Args:
            number: Проверенное число
            result: Результат MillerRabinTester.evaluate

        Returns:
            PrimalityVerdict
        """
        verdict = Verdict.PROBABLY_PRIME if result.is_probable_prime else Verdict.COMPOSITE

        # Граница ошибки определена только для "probably prime" после случайных раундов
        error_bound = None
        if result.is_probable_prime and result.fast_path is None:
            error_bound = result.rounds_run

        return cls(
            number=render(number),
            rounds_requested=result.rounds_requested,
            rounds_run=result.rounds_run,
            verdict=verdict,
            message=verdict.message,
            witness=render(result.witness) if result.witness is not None else None,
            error_bound_exponent=error_bound,
        )


# =============================================================================
# ARITHMETIC RESULT
# =============================================================================


class ArithmeticResult(BaseModel):
    """
    Результат сложения/вычитания BigInt.

    Immutable модель (frozen=True).
    """

    schema_version: str = Field(
        ARITHMETIC_SCHEMA_VERSION, pattern="^1$", description="Версия схемы"
    )
    operation: ArithmeticOperation = Field(..., description="add / sub")
    left: str = Field(..., pattern=_DECIMAL_PATTERN, description="Левый операнд")
    right: str = Field(..., pattern=_DECIMAL_PATTERN, description="Правый операнд")
    result: str = Field(..., pattern=_DECIMAL_PATTERN, description="Результат")

    model_config = {"frozen": True}

    @classmethod
    def build(
        cls,
        operation: ArithmeticOperation,
        left: BigInt,
        right: BigInt,
        result: BigInt,
    ) -> "ArithmeticResult":
        """Построение результата из BigInt операндов."""
        return cls(
            operation=operation,
            left=render(left),
            right=render(right),
            result=render(result),
        )
