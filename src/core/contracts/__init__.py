"""
Contract Validation Module

Модуль для валидации JSON вывода bigprime.
"""

from .validators import (
    ArithmeticResultValidator,
    ContractValidator,
    PrimalityVerdictValidator,
    SchemaLoader,
    dump_arithmetic_result,
    dump_primality_verdict,
    get_schema_loader,
    get_validator,
    validate_arithmetic_result,
    validate_primality_verdict,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PrimalityVerdictValidator",
    "ArithmeticResultValidator",
    # Functions
    "get_schema_loader",
    "get_validator",
    "validate_primality_verdict",
    "validate_arithmetic_result",
    "dump_primality_verdict",
    "dump_arithmetic_result",
]
