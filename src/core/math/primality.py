"""
Primality — Вероятностный тест простоты Miller–Rabin над BigInt

Тест работает целиком в BigInt-представлении: разложение n − 1 = 2^s · d,
выбор случайного основания в [2, n − 2] и модульное возведение в степень
выполняются без сжатия числа до машинного слова.

Порядок проверок:
1. n = 2 или n = 3 → probably prime (fast path)
2. n ≤ 1 или n чётно → composite (fast path)
3. n − 1 = 2^s · d, d нечётно
4. k раундов: случайный witness a, x = a^d mod n;
   x ∈ {1, n − 1} → раунд пройден; иначе до s − 1 возведений в квадрат,
   пока x не станет n − 1; если не стал → composite, оставшиеся раунды
   не выполняются
5. Все k раундов пройдены → probably prime

Вероятность ложноположительного ответа ≤ 4^(−k). k = DEFAULT_ROUNDS (10)
по умолчанию, настраивается через MillerRabinConfig.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Tuple

from src.core.math.bigint import (
    ONE,
    TWO,
    BigInt,
    compare,
    from_int,
    is_even,
    is_zero,
    render,
    sub,
)
from src.core.math.modular import halve, mulmod, powmod
from src.core.math.random_range import random_in_range

logger = logging.getLogger("bigprime.primality")

# =============================================================================
# ПАРАМЕТРЫ ТЕСТА
# =============================================================================

# Количество раундов по умолчанию: ложноположительный ответ ≤ 4^-10 ≈ 9.5e-7
DEFAULT_ROUNDS: Final[int] = 10

_THREE: Final[BigInt] = from_int(3)


@dataclass(frozen=True)
class MillerRabinConfig:
    """Конфигурация теста Miller–Rabin.

    rounds — количество независимых раундов k (≥ 1).
    Граница ошибки: P(composite признан prime) ≤ 4^(−rounds).
    """
    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self) -> None:
        if self.rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {self.rounds}")


class FastPath(str, Enum):
    """Причина решения без случайных раундов."""

    SMALL_PRIME = "small_prime"
    BELOW_TWO = "below_two"
    EVEN = "even"


@dataclass(frozen=True)
class PrimalityResult:
    """Результат теста Miller–Rabin."""

    is_probable_prime: bool
    rounds_requested: int
    rounds_run: int

    # Разложение n − 1 = 2^s · d (None для fast path)
    s: Optional[int]
    d: Optional[BigInt]

    # Основание, доказавшее составность (None если не найдено)
    witness: Optional[BigInt]
    fast_path: Optional[FastPath]

    details: str


# =============================================================================
# ШАГИ АЛГОРИТМА
# =============================================================================


def decompose_power_of_two(m: BigInt) -> Tuple[int, BigInt]:
    """
    Разложение m = 2^s · d с нечётным d.

    Args:
        m: Положительный BigInt (для теста это n − 1)

    Returns:
        (s, d)

    Raises:
        ValueError: Если m == 0

    Examples:
        >>> s, d = decompose_power_of_two(from_int(560))
        >>> s, render(d)
        (4, '35')
    """
    if is_zero(m):
        raise ValueError("Cannot factor powers of two out of zero")

    s = 0
    d = m
    while is_even(d):
        d = halve(d)
        s += 1

    return s, d


def is_strong_witness(a: BigInt, n: BigInt, s: int, d: BigInt) -> bool:
    """
    Проверка, доказывает ли основание a составность n.

    Args:
        a: Основание в [2, n − 2]
        n: Нечётное n ≥ 5
        s, d: Разложение n − 1 = 2^s · d

    Returns:
        True если a — witness составности (n точно составное),
        False если раунд пройден (n — strong probable prime по основанию a)
    """
    n_minus_one = sub(n, ONE)

    x = powmod(a, d, n)
    if compare(x, ONE) == 0 or compare(x, n_minus_one) == 0:
        return False

    for _ in range(s - 1):
        x = mulmod(x, x, n)
        if compare(x, n_minus_one) == 0:
            return False

    return True


# =============================================================================
# TESTER
# =============================================================================


class MillerRabinTester:
    """Miller–Rabin тест с настраиваемым числом раундов и источником случайности.

    Экземпляр не хранит состояние между вызовами, кроме rng.
    """

    def __init__(
        self,
        config: Optional[MillerRabinConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            config: конфигурация теста (default: MillerRabinConfig())
            rng: источник случайности (default: random.SystemRandom)
        """
        self.config = config or MillerRabinConfig()
        self.rng = rng

    def evaluate(self, n: BigInt) -> PrimalityResult:
        """Полная оценка n с диагностикой.

        Args:
            n: проверяемое число

        Returns:
            PrimalityResult с вердиктом, числом выполненных раундов и witness
        """
        rounds = self.config.rounds

        # 1. Fast paths
        if compare(n, TWO) == 0 or compare(n, _THREE) == 0:
            return self._fast_result(True, FastPath.SMALL_PRIME, f"{render(n)} is a small prime")

        if compare(n, ONE) <= 0:
            return self._fast_result(False, FastPath.BELOW_TWO, f"{render(n)} < 2")

        if is_even(n):
            return self._fast_result(False, FastPath.EVEN, f"{render(n)} is even")

        # 2. n − 1 = 2^s · d
        n_minus_one = sub(n, ONE)
        s, d = decompose_power_of_two(n_minus_one)
        logger.debug("n-1 = 2^%d * d, d has %d digits", s, len(render(d)))

        # 3. Случайные раунды, witness в [2, n − 2]
        upper = sub(n, TWO)
        for round_index in range(1, rounds + 1):
            a = random_in_range(TWO, upper, self.rng)

            if is_strong_witness(a, n, s, d):
                logger.debug("round %d/%d: witness %s proves compositeness", round_index, rounds, render(a))
                return PrimalityResult(
                    is_probable_prime=False,
                    rounds_requested=rounds,
                    rounds_run=round_index,
                    s=s,
                    d=d,
                    witness=a,
                    fast_path=None,
                    details=f"witness {render(a)} found in round {round_index}",
                )

            logger.debug("round %d/%d passed", round_index, rounds)

        return PrimalityResult(
            is_probable_prime=True,
            rounds_requested=rounds,
            rounds_run=rounds,
            s=s,
            d=d,
            witness=None,
            fast_path=None,
            details=f"all {rounds} rounds passed, error bound 4^-{rounds}",
        )

    def is_probable_prime(self, n: BigInt) -> bool:
        """True если n вероятно простое, False если составное."""
        return self.evaluate(n).is_probable_prime

    def _fast_result(self, verdict: bool, reason: FastPath, details: str) -> PrimalityResult:
        return PrimalityResult(
            is_probable_prime=verdict,
            rounds_requested=self.config.rounds,
            rounds_run=0,
            s=None,
            d=None,
            witness=None,
            fast_path=reason,
            details=details,
        )


def is_probable_prime(
    n: BigInt,
    k: int = DEFAULT_ROUNDS,
    rng: Optional[random.Random] = None,
) -> bool:
    """
    Miller–Rabin тест простоты.

    Args:
        n: Проверяемое число
        k: Количество раундов (≥ 1), ошибка ≤ 4^(−k)
        rng: Источник случайности (default: random.SystemRandom)

    Returns:
        True — вероятно простое, False — составное (гарантированно)

    Raises:
        ValueError: Если k < 1

    Examples:
        >>> is_probable_prime(from_int(561))
        False
    """
    return MillerRabinTester(MillerRabinConfig(rounds=k), rng).is_probable_prime(n)
