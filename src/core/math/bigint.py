"""
BigInt — Неотрицательные целые произвольной точности

Число хранится как упорядоченная последовательность limbs по основанию
RADIX = 10^19, младший limb первым:

    value = Σ limbs[i] · RADIX^i

Модуль содержит:
- Immutable Pydantic модель BigInt с проверкой инвариантов представления
- Разбор десятичной строки (parse) и каноническую запись (render)
- Сравнение, проверку чётности
- Сложение (add) с переносом и вычитание (sub) с заёмом
- Limb-level kernels, которые переиспользует модуль modular

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb лежит в [0, RADIX)
2. Старший limb ненулевой, кроме числа 0, которое хранится как (0,)
3. Операции никогда не мутируют операнды, результат всегда новый BigInt
4. sub(a, b) при a < b → PreconditionViolation (никакого wrap-around)
"""

from typing import Final, Iterable, List, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество десятичных цифр в одном limb
LIMB_DIGITS: Final[int] = 19

# Основание одного limb: наибольшая степень 10, помещающаяся в uint64.
# Перенос при сложении двух limbs не превышает 1
RADIX: Final[int] = 10**LIMB_DIGITS

_DECIMAL_DIGITS: Final[frozenset] = frozenset("0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormatError(ValueError):
    """
    Строка не является корректной записью неотрицательного десятичного числа.

    Допустимы только ASCII-цифры '0'-'9', длина ≥ 1, без знака и пробелов.
    Ведущие нули допускаются и нормализуются.
    """

    pass


class PreconditionViolation(ValueError):
    """
    Нарушен контракт вызова: sub(a, b) требует a ≥ b.

    Вызывающая сторона обязана сравнить операнды (compare) заранее
    и упорядочить их сама.
    """

    pass


# =============================================================================
# LIMB-LEVEL KERNELS
# =============================================================================


def normalize_limbs(limbs: Iterable[int]) -> Tuple[int, ...]:
    """
    Отбрасывание старших нулевых limbs (минимум один limb остаётся).

    Args:
        limbs: Последовательность limbs, младший первым

    Returns:
        Нормализованный tuple limbs

    Examples:
        >>> normalize_limbs([5, 0, 0])
        (5,)
        >>> normalize_limbs([0, 0])
        (0,)
        >>> normalize_limbs([])
        (0,)
    """
    result = list(limbs)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    if not result:
        return (0,)
    return tuple(result)


def compare_limbs(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение двух нормализованных последовательностей limbs.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def add_limbs(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Сложение limbs с распространением переноса.

    Проход от младшего limb к старшему, недостающие limbs считаются нулями,
    цикл продолжается, пока есть limbs хотя бы в одном операнде или ненулевой
    перенос.

    Returns:
        Список limbs результата (может содержать старший нулевой limb,
        нормализация за вызывающей стороной)
    """
    result: List[int] = []
    carry = 0
    i = 0
    len_a = len(a)
    len_b = len(b)

    while i < len_a or i < len_b or carry:
        limb_a = a[i] if i < len_a else 0
        limb_b = b[i] if i < len_b else 0

        total = limb_a + limb_b + carry
        result.append(total % RADIX)
        carry = total // RADIX
        i += 1

    return result


def sub_limbs(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Вычитание limbs с заёмом. Требует a ≥ b (не проверяется здесь).

    Returns:
        Список limbs результата той же длины, что и a (без нормализации)
    """
    result: List[int] = []
    borrow = 0
    len_b = len(b)

    for i, limb_a in enumerate(a):
        limb_b = b[i] if i < len_b else 0

        diff = limb_a - limb_b - borrow
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return result


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Неотрицательное целое произвольной точности.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр,
    экземпляры безопасно разделяются между потоками без синхронизации.

    Равенство и hash определяются последовательностью limbs, что корректно
    благодаря инварианту нормализации.
    """

    limbs: Tuple[int, ...] = Field(
        ..., min_length=1, description="Limbs по основанию 10^19, младший первым"
    )

    model_config = {"frozen": True, "strict": True}

    @field_validator("limbs")
    @classmethod
    def validate_limbs(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """
        Проверка инвариантов представления.

        - Каждый limb в [0, RADIX)
        - Нет старших нулевых limbs (кроме числа 0)
        """
        for index, limb in enumerate(v):
            if limb < 0 or limb >= RADIX:
                raise ValueError(f"limb[{index}]={limb} outside [0, RADIX)")

        if len(v) > 1 and v[-1] == 0:
            raise ValueError(f"most significant limb is zero in {len(v)}-limb value")

        return v

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "BigInt":
        """
        Построение BigInt из произвольной (ненормализованной) последовательности limbs.

        Args:
            limbs: Limbs, младший первым; старшие нули отбрасываются

        Returns:
            Нормализованный BigInt
        """
        return cls(limbs=normalize_limbs(limbs))

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"BigInt({render(self)})"

    @property
    def limb_count(self) -> int:
        """Количество limbs в нормализованном представлении."""
        return len(self.limbs)


ZERO: Final[BigInt] = BigInt(limbs=(0,))
ONE: Final[BigInt] = BigInt(limbs=(1,))
TWO: Final[BigInt] = BigInt(limbs=(2,))


# =============================================================================
# РАЗБОР И ЗАПИСЬ
# =============================================================================


def parse(text: str) -> BigInt:
    """
    Разбор десятичной строки в BigInt.

    Строка режется на группы по LIMB_DIGITS цифр, начиная с младшего конца;
    каждая группа становится одним limb. Ведущие нули нормализуются.

    Args:
        text: Строка ASCII-цифр, длина ≥ 1

    Returns:
        BigInt

    Raises:
        InvalidFormatError: Если строка пустая, не строка или содержит нецифровой символ

    Examples:
        >>> parse("12345").limbs
        (12345,)
        >>> parse("10000000000000000000").limbs
        (0, 1)
        >>> parse("000").limbs
        (0,)
    """
    if not isinstance(text, str):
        raise InvalidFormatError(f"Expected decimal string, got {type(text).__name__}")

    if not text:
        raise InvalidFormatError("Empty string is not a decimal numeral")

    for position, char in enumerate(text):
        if char not in _DECIMAL_DIGITS:
            raise InvalidFormatError(
                f"Invalid character {char!r} at position {position} in decimal numeral"
            )

    limbs: List[int] = []
    end = len(text)
    while end > 0:
        start = max(0, end - LIMB_DIGITS)
        limbs.append(int(text[start:end]))
        end = start

    return BigInt.from_limbs(limbs)


def render(value: BigInt) -> str:
    """
    Каноническая десятичная запись BigInt.

    Старший limb пишется без дополнения нулями, все остальные дополняются
    нулями до LIMB_DIGITS цифр. Ноль записывается как "0".

    Examples:
        >>> render(parse("007"))
        '7'
        >>> render(BigInt(limbs=(1, 1)))
        '10000000000000000001'
    """
    limbs = value.limbs
    parts = [str(limbs[-1])]
    for limb in reversed(limbs[:-1]):
        parts.append(str(limb).zfill(LIMB_DIGITS))
    return "".join(parts)


def format_limbs(value: BigInt) -> str:
    """
    Диагностическая запись limbs: от старшего к младшему, через пробел, без дополнения.

    Не является канонической записью числа (для неё render).

    Examples:
        >>> format_limbs(BigInt(limbs=(5, 1)))
        '1 5'
    """
    return " ".join(str(limb) for limb in reversed(value.limbs))


def from_int(value: int) -> BigInt:
    """
    Конверсия неотрицательного Python int в BigInt (граничный helper для констант).

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"BigInt is non-negative, got {value}")

    limbs: List[int] = []
    while value:
        value, limb = divmod(value, RADIX)
        limbs.append(limb)

    return BigInt.from_limbs(limbs)


# =============================================================================
# СРАВНЕНИЕ И ПРЕДИКАТЫ
# =============================================================================


def compare(a: BigInt, b: BigInt) -> int:
    """
    Сравнение двух BigInt.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b
    """
    return compare_limbs(a.limbs, b.limbs)


def is_zero(value: BigInt) -> bool:
    """True если value == 0."""
    return value.limbs == (0,)


def is_odd(value: BigInt) -> bool:
    """
    Проверка нечётности.

    RADIX чётен, поэтому чётность числа совпадает с чётностью младшего limb.
    """
    return value.limbs[0] % 2 == 1


def is_even(value: BigInt) -> bool:
    """True если value чётно."""
    return not is_odd(value)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Сложение двух BigInt.

    Всегда успешно: операнды беззнаковые, перенос не превышает 1.

    Examples:
        >>> render(add(parse("9999999999999999999"), parse("1")))
        '10000000000000000000'
    """
    return BigInt.from_limbs(add_limbs(a.limbs, b.limbs))


def sub(a: BigInt, b: BigInt) -> BigInt:
    """
    Вычитание a - b.

    Args:
        a: Уменьшаемое
        b: Вычитаемое (должно быть ≤ a)

    Returns:
        Нормализованная разность

    Raises:
        PreconditionViolation: Если a < b

    Examples:
        >>> render(sub(parse("10000000000000000000"), parse("1")))
        '9999999999999999999'
    """
    if compare(a, b) < 0:
        raise PreconditionViolation(
            f"sub requires minuend >= subtrahend, got {render(a)} < {render(b)}"
        )

    return BigInt.from_limbs(sub_limbs(a.limbs, b.limbs))
