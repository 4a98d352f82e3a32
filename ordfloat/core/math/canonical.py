"""
Canonical — Канонизация IEEE-754 значений для total order и hashing

Модуль содержит общие примитивы, на которых построены обе обёртки
(OrderedFloat и NotNan):
- Описание форматов binary32 / binary64 (FloatFormat)
- Классификация NaN и свёртка -0.0 → +0.0
- Побитовая конверсия float ↔ int без потери payload у NaN
- Total order компаратор и hash, согласованный с ним
- JSON представление неконечных значений (NaN, Infinity, -Infinity)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. total_cmp задаёт строгий total order: ровно одно из <, ==, > для любой пары
2. NaN больше любого не-NaN значения, включая +inf; все NaN равны между собой
3. -0.0 и +0.0 равны для сравнения и hashing
4. total_cmp(a, b) == 0  ⇒  float_hash(a) == float_hash(b)
5. Канонизация применяется ТОЛЬКО к сравнению и hashing, хранимые биты
   не изменяются (to_bits/from_bits: точный round trip)
"""

import math
import struct
from dataclasses import dataclass
from typing import Final, Tuple, Union

# =============================================================================
# КАНОНИЧЕСКИЕ NaN
# =============================================================================

# Quiet NaN без payload и со сброшенным знаком
CANONICAL_NAN_BITS_32: Final[int] = 0x7FC00000
CANONICAL_NAN_BITS_64: Final[int] = 0x7FF8000000000000

# Сдвиг мантиссы binary32 внутри мантиссы binary64 (52 - 23)
_MANTISSA_SHIFT_32_TO_64: Final[int] = 29


# =============================================================================
# ФОРМАТЫ
# =============================================================================


@dataclass(frozen=True)
class FloatFormat:
    """
    Описание двоичного формата IEEE-754.

    Immutable конфигурация (frozen=True), передаётся явно через параметр fmt.
    Python хранит любое значение как binary64, формат определяет округление
    при конструировании и битовое представление (to_bits/from_bits).
    """

    name: str
    width: int
    struct_code: str
    exponent_bits: int
    mantissa_bits: int
    canonical_nan_bits: int

    @property
    def bits_mask(self) -> int:
        """Маска всех битов формата."""
        return (1 << self.width) - 1

    @property
    def sign_mask(self) -> int:
        """Маска знакового бита."""
        return 1 << (self.width - 1)

    @property
    def exponent_mask(self) -> int:
        """Маска экспоненты (на своём месте в слове)."""
        return ((1 << self.exponent_bits) - 1) << self.mantissa_bits

    @property
    def mantissa_mask(self) -> int:
        """Маска мантиссы (payload для NaN)."""
        return (1 << self.mantissa_bits) - 1

    @property
    def quiet_bit(self) -> int:
        """Старший бит мантиссы (признак quiet NaN)."""
        return 1 << (self.mantissa_bits - 1)

    @classmethod
    def for_width(cls, width: int) -> "FloatFormat":
        """
        Формат по разрядности.

        Raises:
            ValueError: Если разрядность не 32 и не 64
        """
        if width == 32:
            return FLOAT32
        if width == 64:
            return FLOAT64
        raise ValueError(f"Unsupported float width: {width} (expected 32 or 64)")


FLOAT32: Final[FloatFormat] = FloatFormat(
    name="binary32",
    width=32,
    struct_code="f",
    exponent_bits=8,
    mantissa_bits=23,
    canonical_nan_bits=CANONICAL_NAN_BITS_32,
)

FLOAT64: Final[FloatFormat] = FloatFormat(
    name="binary64",
    width=64,
    struct_code="d",
    exponent_bits=11,
    mantissa_bits=52,
    canonical_nan_bits=CANONICAL_NAN_BITS_64,
)


# =============================================================================
# КЛАССИФИКАЦИЯ И КАНОНИЗАЦИЯ
# =============================================================================


def is_nan(value: float) -> bool:
    """Проверка, является ли значение NaN (любой payload, любой знак)."""
    return math.isnan(value)


def canonicalize_zero(value: float) -> float:
    """
    Свёртка -0.0 → +0.0.

    Все остальные значения (включая NaN и ±inf) возвращаются без изменений.

    Examples:
        >>> math.copysign(1.0, canonicalize_zero(-0.0))
        1.0
        >>> canonicalize_zero(-1.5)
        -1.5
    """
    if value == 0.0:
        return 0.0
    return value


# =============================================================================
# ПОБИТОВАЯ КОНВЕРСИЯ
# =============================================================================


def _bits64(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _from_bits64(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


def _pack32(value: float) -> bytes:
    # NaN сюда не попадает: сужение NaN выполняется вручную, см. to_bits
    try:
        return struct.pack("<f", value)
    except OverflowError:
        # Округление за пределы binary32 даёт бесконечность со знаком
        return struct.pack("<f", math.copysign(math.inf, value))


def to_bits(value: float, fmt: FloatFormat = FLOAT64) -> int:
    """
    Битовое представление значения в формате fmt.

    NaN сужается в binary32 вручную: знак сохраняется, payload берётся из
    старших битов мантиссы binary64. Так signaling NaN не «тихнет» при
    конверсии, как это происходит при аппаратном приведении double → float.

    Args:
        value: Значение (Python float, т.е. binary64)
        fmt: Целевой формат (default: FLOAT64)

    Returns:
        Беззнаковое целое из fmt.width бит
    """
    if fmt.width == 64:
        return _bits64(value)

    if not is_nan(value):
        return struct.unpack("<I", _pack32(value))[0]

    bits = _bits64(value)
    sign = (bits >> 63) & 1
    payload = (bits & FLOAT64.mantissa_mask) >> _MANTISSA_SHIFT_32_TO_64
    if payload == 0:
        # Payload потерян при сужении: без него паттерн стал бы бесконечностью
        payload = FLOAT32.quiet_bit
    return (sign << 31) | FLOAT32.exponent_mask | payload


def from_bits(bits: int, fmt: FloatFormat = FLOAT64) -> float:
    """
    Значение по битовому представлению формата fmt.

    Точная операция, обратная to_bits: from_bits(to_bits(x)) побитово равен x
    для всех значений, представимых в fmt, включая любые NaN payload.

    Raises:
        ValueError: Если bits не помещается в fmt.width бит или отрицателен
    """
    if bits < 0 or bits > fmt.bits_mask:
        raise ValueError(f"bits {bits:#x} out of range for {fmt.name}")

    if fmt.width == 64:
        return _from_bits64(bits)

    is_nan_pattern = (bits & FLOAT32.exponent_mask) == FLOAT32.exponent_mask and (
        bits & FLOAT32.mantissa_mask
    )
    if not is_nan_pattern:
        return struct.unpack("<f", struct.pack("<I", bits))[0]

    sign = (bits >> 31) & 1
    payload = bits & FLOAT32.mantissa_mask
    return _from_bits64(
        (sign << 63) | FLOAT64.exponent_mask | (payload << _MANTISSA_SHIFT_32_TO_64)
    )


def round_to_format(value: float, fmt: FloatFormat = FLOAT64) -> float:
    """
    Округление значения до ближайшего представимого в fmt.

    - binary64: без изменений
    - binary32: round-to-nearest-even, переполнение → ±inf, NaN сохраняет
      знак и старшие биты payload

    Examples:
        >>> round_to_format(0.1, FLOAT32)
        0.10000000149011612
        >>> round_to_format(1e300, FLOAT32)
        inf
    """
    if fmt.width == 64:
        return value
    if is_nan(value):
        return from_bits(to_bits(value, fmt), fmt)
    return struct.unpack("<f", _pack32(value))[0]


def canonical_bits(value: float) -> int:
    """
    Канонический binary64 паттерн значения.

    - -0.0 → паттерн +0.0
    - любой NaN → CANONICAL_NAN_BITS_64
    - остальные значения → собственные биты

    Канонизация всегда выполняется в binary64: равные значения разной
    разрядности (например, 1.0 в binary32 и binary64) дают одинаковый паттерн.
    """
    if is_nan(value):
        return CANONICAL_NAN_BITS_64
    return _bits64(canonicalize_zero(value))


# =============================================================================
# TOTAL ORDER И HASH
# =============================================================================


def total_cmp(a: float, b: float) -> int:
    """
    Total order сравнение двух float.

    Алгоритм:
    1. Нативное упорядоченное сравнение (покрывает все не-NaN пары,
       -0.0 == +0.0 по нативному равенству)
    2. Если хотя бы один операнд NaN: NaN больше любого не-NaN значения,
       все NaN равны между собой независимо от payload и знака

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> total_cmp(1.0, 2.0)
        -1
        >>> total_cmp(-0.0, 0.0)
        0
        >>> total_cmp(float("nan"), float("inf"))
        1
        >>> total_cmp(float("nan"), -float("nan"))
        0
    """
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0

    a_nan = is_nan(a)
    b_nan = is_nan(b)
    if a_nan and b_nan:
        return 0
    return 1 if a_nan else -1


def float_hash(value: float) -> int:
    """
    Hash, согласованный с total_cmp.

    Хэшируется канонический паттерн (canonical_bits), поэтому ±0.0 и все NaN
    дают одинаковый hash внутри своего класса эквивалентности.
    """
    return hash(canonical_bits(value))


# =============================================================================
# JSON ПРЕДСТАВЛЕНИЕ
# =============================================================================

# JSON не имеет литералов NaN/Infinity, неконечные значения пишутся строками
JSON_NAN: Final[str] = "NaN"
JSON_INFINITY: Final[str] = "Infinity"
JSON_NEG_INFINITY: Final[str] = "-Infinity"
JSON_NON_FINITE: Final[Tuple[str, ...]] = (JSON_NAN, JSON_INFINITY, JSON_NEG_INFINITY)


def to_json_number(value: float) -> Union[float, str]:
    """
    JSON-совместимое значение float.

    Examples:
        >>> to_json_number(1.5)
        1.5
        >>> to_json_number(float("-inf"))
        '-Infinity'
    """
    if is_nan(value):
        return JSON_NAN
    if math.isinf(value):
        return JSON_INFINITY if value > 0 else JSON_NEG_INFINITY
    return value


def from_json_number(value: Union[float, str]) -> float:
    """
    Обратное преобразование to_json_number.

    Raises:
        ValueError: Если строка не является JSON_NAN / JSON_INFINITY / JSON_NEG_INFINITY
    """
    if isinstance(value, str) and value not in JSON_NON_FINITE:
        raise ValueError(f"Unsupported non-finite token: {value!r}")
    return float(value)
