"""
Core math modules для bigprime

Арифметика произвольной точности над limbs по основанию 10^19
и вероятностный тест простоты Miller–Rabin.
"""

# BigInt: представление, разбор, сложение/вычитание
from src.core.math.bigint import (
    # Constants
    LIMB_DIGITS,
    ONE,
    RADIX,
    TWO,
    ZERO,
    # Exceptions
    InvalidFormatError,
    PreconditionViolation,
    # Types
    BigInt,
    # Functions
    add,
    compare,
    format_limbs,
    from_int,
    is_even,
    is_odd,
    is_zero,
    parse,
    render,
    sub,
)

# Modular: умножение, деление, powmod
from src.core.math.modular import (
    divmod_big,
    halve,
    mulmod,
    multiply,
    powmod,
    reduce_mod,
)

# Random Range
from src.core.math.random_range import random_below, random_in_range

# Primality (Miller–Rabin)
from src.core.math.primality import (
    DEFAULT_ROUNDS,
    FastPath,
    MillerRabinConfig,
    MillerRabinTester,
    PrimalityResult,
    decompose_power_of_two,
    is_probable_prime,
    is_strong_witness,
)

__all__ = [
    # BigInt: Constants
    "LIMB_DIGITS",
    "ONE",
    "RADIX",
    "TWO",
    "ZERO",
    # BigInt: Exceptions
    "InvalidFormatError",
    "PreconditionViolation",
    # BigInt: Types
    "BigInt",
    # BigInt: Functions
    "add",
    "compare",
    "format_limbs",
    "from_int",
    "is_even",
    "is_odd",
    "is_zero",
    "parse",
    "render",
    "sub",
    # Modular: Functions
    "divmod_big",
    "halve",
    "mulmod",
    "multiply",
    "powmod",
    "reduce_mod",
    # Random Range: Functions
    "random_below",
    "random_in_range",
    # Primality: Constants
    "DEFAULT_ROUNDS",
    # Primality: Types
    "FastPath",
    "MillerRabinConfig",
    "MillerRabinTester",
    "PrimalityResult",
    # Primality: Functions
    "decompose_power_of_two",
    "is_probable_prime",
    "is_strong_witness",
]
