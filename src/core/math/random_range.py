"""
Random Range — Равномерно распределённые случайные BigInt

Генерация случайного BigInt в замкнутом интервале [low, high] без
ограничения машинным словом: каждый limb выбирается независимо, старший
limb ограничен старшим limb ширины интервала, кандидаты вне интервала
отбрасываются (rejection sampling).

Вероятность принятия кандидата ≥ 1/2, поэтому ожидаемое число попыток ≤ 2.

Источник случайности по умолчанию — random.SystemRandom (os.urandom).
Для воспроизводимых тестов передаётся random.Random(seed).
Ошибки источника (исчерпание энтропии, OSError) не перехватываются.
"""

import random
from typing import List, Optional

from src.core.math.bigint import (
    ONE,
    RADIX,
    BigInt,
    add,
    compare,
    compare_limbs,
    render,
    sub,
)

_SYSTEM_RANDOM = random.SystemRandom()


def random_below(bound: BigInt, rng: Optional[random.Random] = None) -> BigInt:
    """
    Случайный BigInt, равномерно распределённый в [0, bound).

    Args:
        bound: Верхняя граница (исключительно), > 0
        rng: Источник случайности (default: random.SystemRandom)

    Returns:
        BigInt в [0, bound)

    Raises:
        ValueError: Если bound == 0
    """
    limbs = bound.limbs
    if limbs == (0,):
        raise ValueError("random_below requires a positive bound")

    source = rng if rng is not None else _SYSTEM_RANDOM
    top = limbs[-1]

    while True:
        candidate: List[int] = [source.randrange(RADIX) for _ in range(len(limbs) - 1)]
        candidate.append(source.randrange(top + 1))

        # Сравнение без нормализации: длины равны, старшие нули сравниваются как limbs
        if compare_limbs(candidate, limbs) < 0:
            return BigInt.from_limbs(candidate)


def random_in_range(
    low: BigInt, high: BigInt, rng: Optional[random.Random] = None
) -> BigInt:
    """
    Случайный BigInt, равномерно распределённый в [low, high].

    Args:
        low: Нижняя граница (включительно)
        high: Верхняя граница (включительно), high ≥ low
        rng: Источник случайности (default: random.SystemRandom)

    Returns:
        BigInt в [low, high]

    Raises:
        ValueError: Если high < low
    """
    if compare(high, low) < 0:
        raise ValueError(f"Empty range: high {render(high)} < low {render(low)}")

    width = add(sub(high, low), ONE)
    return add(low, random_below(width, rng))
