"""
Domain models and value objects.

Contains result models for external output: PrimalityVerdict, ArithmeticResult.
"""

from src.core.domain.verdict import (
    ARITHMETIC_SCHEMA_VERSION,
    PRIMALITY_SCHEMA_VERSION,
    VERDICT_MESSAGES,
    ArithmeticOperation,
    ArithmeticResult,
    PrimalityVerdict,
    Verdict,
)

__all__ = [
    # Constants
    "ARITHMETIC_SCHEMA_VERSION",
    "PRIMALITY_SCHEMA_VERSION",
    "VERDICT_MESSAGES",
    # Enums
    "ArithmeticOperation",
    "Verdict",
    # Models
    "ArithmeticResult",
    "PrimalityVerdict",
]
