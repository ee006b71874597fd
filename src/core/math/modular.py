"""
Modular — Умножение, деление и модульное возведение в степень над limbs

Модуль обслуживает Miller–Rabin: все операнды (основание, показатель, модуль)
остаются в полном BigInt-представлении, без сжатия до машинного слова.

Алгоритмы:
- Умножение: schoolbook O(n·m) над limbs по основанию RADIX
- Короткое деление на одно-limb делитель (halve, нормализация Knuth D)
- Длинное деление: Knuth, TAOCP vol. 2, 4.3.1, Algorithm D
- powmod: бинарное возведение в степень (right-to-left square-and-multiply)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат reduce_mod/powmod всегда в [0, modulus)
2. Нулевой модуль → ZeroDivisionError
3. Операнды не мутируются, внутренние буферы — локальные списки
"""

from typing import List, Sequence, Tuple

from src.core.math.bigint import (
    RADIX,
    ZERO,
    BigInt,
    compare_limbs,
    normalize_limbs,
)

# =============================================================================
# LIMB-LEVEL KERNELS
# =============================================================================


def _is_zero_limbs(limbs: Sequence[int]) -> bool:
    return len(limbs) == 1 and limbs[0] == 0


def mul_small_limbs(a: Sequence[int], factor: int) -> List[int]:
    """
    Умножение limbs на одно-limb множитель (0 ≤ factor < RADIX).

    Returns:
        Limbs произведения длины len(a) + 1 (старший limb — финальный перенос)
    """
    result: List[int] = []
    carry = 0

    for limb in a:
        product = limb * factor + carry
        result.append(product % RADIX)
        carry = product // RADIX

    result.append(carry)
    return result


def divmod_small_limbs(a: Sequence[int], divisor: int) -> Tuple[List[int], int]:
    """
    Короткое деление limbs на одно-limb делитель (0 < divisor < RADIX).

    Проход от старшего limb к младшему с переносом остатка.

    Returns:
        (quotient_limbs, remainder) — quotient без нормализации
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero limb")

    quotient = [0] * len(a)
    remainder = 0

    for i in range(len(a) - 1, -1, -1):
        current = remainder * RADIX + a[i]
        quotient[i], remainder = divmod(current, divisor)

    return quotient, remainder


def mul_limbs(a: Sequence[int], b: Sequence[int]) -> Tuple[int, ...]:
    """
    Schoolbook умножение двух последовательностей limbs.

    Returns:
        Нормализованные limbs произведения
    """
    if _is_zero_limbs(a) or _is_zero_limbs(b):
        return (0,)

    len_b = len(b)
    result = [0] * (len(a) + len_b)

    for i, limb_a in enumerate(a):
        if limb_a == 0:
            continue

        carry = 0
        for j, limb_b in enumerate(b):
            total = result[i + j] + limb_a * limb_b + carry
            result[i + j] = total % RADIX
            carry = total // RADIX

        k = i + len_b
        while carry:
            total = result[k] + carry
            result[k] = total % RADIX
            carry = total // RADIX
            k += 1

    return normalize_limbs(result)


def divmod_limbs(
    u: Sequence[int], v: Sequence[int]
) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Длинное деление нормализованных limbs: u = q·v + r, 0 ≤ r < v.

    Knuth Algorithm D:
    1. Нормализация: u и v умножаются на d = RADIX // (v_top + 1),
       чтобы старший limb делителя был ≥ RADIX // 2
    2. Для каждой позиции j оценка qhat по двум старшим limbs остатка,
       уточнение по третьему limb (не более двух коррекций)
    3. Multiply-and-subtract; при отрицательном результате qhat -= 1 и add-back
    4. Денормализация остатка делением на d

    Returns:
        (quotient_limbs, remainder_limbs), оба нормализованы

    Raises:
        ZeroDivisionError: Если v == 0
    """
    if _is_zero_limbs(v):
        raise ZeroDivisionError("BigInt division by zero")

    if compare_limbs(u, v) < 0:
        return (0,), normalize_limbs(u)

    if len(v) == 1:
        quotient, remainder = divmod_small_limbs(u, v[0])
        return normalize_limbs(quotient), (remainder,)

    n = len(v)
    m = len(u) - n

    d = RADIX // (v[-1] + 1)
    un = mul_small_limbs(u, d)  # длина m + n + 1
    vn = mul_small_limbs(v, d)[:n]  # перенос нулевой, v_top·d < RADIX

    v_top = vn[n - 1]
    v_next = vn[n - 2]
    quotient = [0] * (m + 1)

    for j in range(m, -1, -1):
        numerator = un[j + n] * RADIX + un[j + n - 1]
        qhat, rhat = divmod(numerator, v_top)

        while qhat >= RADIX or qhat * v_next > rhat * RADIX + un[j + n - 2]:
            qhat -= 1
            rhat += v_top
            if rhat >= RADIX:
                break

        # Multiply-and-subtract: un[j..j+n] -= qhat * vn
        carry = 0
        borrow = 0
        for i in range(n):
            product = qhat * vn[i] + carry
            carry = product // RADIX
            diff = un[i + j] - product % RADIX - borrow
            if diff < 0:
                diff += RADIX
                borrow = 1
            else:
                borrow = 0
            un[i + j] = diff

        top = un[j + n] - carry - borrow
        if top < 0:
            # qhat оказался на единицу больше: add-back
            un[j + n] = top + RADIX
            qhat -= 1
            carry = 0
            for i in range(n):
                total = un[i + j] + vn[i] + carry
                un[i + j] = total % RADIX
                carry = total // RADIX
            un[j + n] = (un[j + n] + carry) % RADIX
        else:
            un[j + n] = top

        quotient[j] = qhat

    remainder, _ = divmod_small_limbs(un[:n], d)
    return normalize_limbs(quotient), normalize_limbs(remainder)


def mod_limbs(u: Sequence[int], modulus: Sequence[int]) -> Tuple[int, ...]:
    """Остаток u mod modulus над нормализованными limbs."""
    return divmod_limbs(u, modulus)[1]


def halve_limbs(a: Sequence[int]) -> Tuple[int, ...]:
    """Целочисленное деление limbs на 2 (сдвиг показателя в powmod)."""
    quotient, _ = divmod_small_limbs(a, 2)
    return normalize_limbs(quotient)


# =============================================================================
# BIGINT API
# =============================================================================


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """
    Произведение двух BigInt.

    Examples:
        >>> from src.core.math.bigint import parse, render
        >>> render(multiply(parse("10000000000000000000"), parse("10000000000000000000")))
        '100000000000000000000000000000000000000'
    """
    return BigInt(limbs=mul_limbs(a.limbs, b.limbs))


def divmod_big(a: BigInt, b: BigInt) -> Tuple[BigInt, BigInt]:
    """
    Частное и остаток: a = q·b + r, 0 ≤ r < b.

    Raises:
        ZeroDivisionError: Если b == 0
    """
    quotient, remainder = divmod_limbs(a.limbs, b.limbs)
    return BigInt(limbs=quotient), BigInt(limbs=remainder)


def reduce_mod(a: BigInt, modulus: BigInt) -> BigInt:
    """
    Остаток a mod modulus, результат в [0, modulus).

    Raises:
        ZeroDivisionError: Если modulus == 0
    """
    return BigInt(limbs=mod_limbs(a.limbs, modulus.limbs))


def halve(a: BigInt) -> BigInt:
    """
    floor(a / 2).

    Examples:
        >>> from src.core.math.bigint import parse, render
        >>> render(halve(parse("10000000000000000001")))
        '5000000000000000000'
    """
    return BigInt(limbs=halve_limbs(a.limbs))


def mulmod(a: BigInt, b: BigInt, modulus: BigInt) -> BigInt:
    """(a · b) mod modulus."""
    return BigInt(limbs=mod_limbs(mul_limbs(a.limbs, b.limbs), modulus.limbs))


def powmod(base: BigInt, exponent: BigInt, modulus: BigInt) -> BigInt:
    """
    Модульное возведение в степень: base^exponent mod modulus.

    Бинарный алгоритм: на каждом шаге, если младший бит показателя установлен,
    аккумулятор умножается на текущую степень основания; затем показатель
    делится на 2, а основание возводится в квадрат по модулю.

    Args:
        base: Основание (любое, предварительно приводится по модулю)
        exponent: Показатель (exponent == 0 → 1 mod modulus)
        modulus: Модуль (> 0)

    Returns:
        Результат в [0, modulus)

    Raises:
        ZeroDivisionError: Если modulus == 0

    Examples:
        >>> from src.core.math.bigint import parse, render
        >>> render(powmod(parse("4"), parse("13"), parse("497")))
        '445'
    """
    m = modulus.limbs
    if _is_zero_limbs(m):
        raise ZeroDivisionError("powmod with zero modulus")

    if m == (1,):
        return ZERO

    result: Tuple[int, ...] = (1,)
    power = mod_limbs(base.limbs, m)
    e: Tuple[int, ...] = exponent.limbs

    while not _is_zero_limbs(e):
        if e[0] % 2 == 1:
            result = mod_limbs(mul_limbs(result, power), m)

        e = halve_limbs(e)
        if not _is_zero_limbs(e):
            power = mod_limbs(mul_limbs(power, power), m)

    return BigInt(limbs=result)
