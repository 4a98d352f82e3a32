"""
Тесты для модуля Canonical

Проверяет:
1. Классификацию NaN и свёртку -0.0 → +0.0
2. Побитовую конверсию binary32/binary64 (включая signaling NaN)
3. Округление до формата
4. Канонические паттерны для hashing
5. Total order компаратор
6. JSON представление неконечных значений
"""

import math
import struct

import pytest

from ordfloat.core.math.canonical import (
    CANONICAL_NAN_BITS_32,
    CANONICAL_NAN_BITS_64,
    FLOAT32,
    FLOAT64,
    JSON_NAN,
    FloatFormat,
    canonical_bits,
    canonicalize_zero,
    float_hash,
    from_bits,
    from_json_number,
    is_nan,
    round_to_format,
    to_bits,
    to_json_number,
    total_cmp,
)

NAN = float("nan")
INF = float("inf")

# Signaling NaN (quiet bit сброшен, payload = 1)
SNAN_BITS_64 = 0x7FF0000000000001
SNAN_BITS_32 = 0x7F800001


def sign_bit(value: float) -> bool:
    return (struct.pack(">d", value)[0] & 0x80) != 0


# =============================================================================
# ФОРМАТЫ
# =============================================================================


class TestFloatFormat:
    """Тесты для FloatFormat"""

    def test_for_width(self) -> None:
        """Формат по разрядности"""
        assert FloatFormat.for_width(32) is FLOAT32
        assert FloatFormat.for_width(64) is FLOAT64

    def test_for_width_unsupported(self) -> None:
        """Неподдерживаемая разрядность вызывает ошибку"""
        with pytest.raises(ValueError, match="Unsupported float width"):
            FloatFormat.for_width(16)

    def test_masks(self) -> None:
        """Маски соответствуют IEEE-754"""
        assert FLOAT32.exponent_mask == 0x7F800000
        assert FLOAT32.mantissa_mask == 0x007FFFFF
        assert FLOAT32.sign_mask == 0x80000000
        assert FLOAT64.exponent_mask == 0x7FF0000000000000
        assert FLOAT64.quiet_bit == 0x0008000000000000

    def test_canonical_nan_is_quiet_nan(self) -> None:
        """Канонические NaN являются quiet NaN"""
        assert FLOAT32.canonical_nan_bits == CANONICAL_NAN_BITS_32
        assert FLOAT64.canonical_nan_bits == CANONICAL_NAN_BITS_64
        assert math.isnan(from_bits(CANONICAL_NAN_BITS_32, FLOAT32))
        assert math.isnan(from_bits(CANONICAL_NAN_BITS_64, FLOAT64))

    def test_immutable(self) -> None:
        """FloatFormat неизменяем"""
        with pytest.raises(AttributeError):
            FLOAT64.width = 32  # type: ignore


# =============================================================================
# КЛАССИФИКАЦИЯ И КАНОНИЗАЦИЯ
# =============================================================================


class TestCanonicalizeZero:
    """Тесты для canonicalize_zero и is_nan"""

    def test_negative_zero_folded(self) -> None:
        """-0.0 → +0.0"""
        result = canonicalize_zero(-0.0)
        assert result == 0.0
        assert not sign_bit(result)

    def test_positive_zero_unchanged(self) -> None:
        """+0.0 остаётся +0.0"""
        assert not sign_bit(canonicalize_zero(0.0))

    def test_other_values_unchanged(self) -> None:
        """Остальные значения без изменений"""
        assert canonicalize_zero(-1.5) == -1.5
        assert canonicalize_zero(INF) == INF
        assert canonicalize_zero(-INF) == -INF
        assert math.isnan(canonicalize_zero(NAN))

    def test_is_nan(self) -> None:
        """Классификация NaN"""
        assert is_nan(NAN)
        assert is_nan(-NAN)
        assert is_nan(from_bits(SNAN_BITS_64))
        assert not is_nan(INF)
        assert not is_nan(0.0)


# =============================================================================
# ПОБИТОВАЯ КОНВЕРСИЯ
# =============================================================================


class TestBits64:
    """Тесты побитовой конверсии binary64"""

    def test_known_patterns(self) -> None:
        """Известные паттерны"""
        assert to_bits(1.0) == 0x3FF0000000000000
        assert to_bits(-0.0) == 0x8000000000000000
        assert to_bits(INF) == 0x7FF0000000000000
        assert from_bits(0xC000000000000000) == -2.0

    def test_signaling_nan_round_trip(self) -> None:
        """Signaling NaN сохраняет биты"""
        assert to_bits(from_bits(SNAN_BITS_64)) == SNAN_BITS_64

    def test_nan_payload_round_trip(self) -> None:
        """Произвольный payload и знак NaN сохраняются"""
        for bits in (0x7FF8000000000123, 0xFFF0000000ABCDEF, 0xFFFFFFFFFFFFFFFF):
            assert to_bits(from_bits(bits)) == bits

    def test_out_of_range(self) -> None:
        """Паттерн вне диапазона вызывает ошибку"""
        with pytest.raises(ValueError, match="out of range"):
            from_bits(1 << 64)
        with pytest.raises(ValueError, match="out of range"):
            from_bits(-1)


class TestBits32:
    """Тесты побитовой конверсии binary32"""

    def test_known_patterns(self) -> None:
        """Известные паттерны"""
        assert to_bits(1.5, FLOAT32) == 0x3FC00000
        assert to_bits(-0.0, FLOAT32) == 0x80000000
        assert to_bits(-INF, FLOAT32) == 0xFF800000
        assert from_bits(0x40490FDB, FLOAT32) == pytest.approx(math.pi, rel=1e-7)

    def test_signaling_nan_round_trip(self) -> None:
        """Signaling NaN binary32 не «тихнет»"""
        value = from_bits(SNAN_BITS_32, FLOAT32)
        assert math.isnan(value)
        assert to_bits(value, FLOAT32) == SNAN_BITS_32

    def test_negative_quiet_nan_round_trip(self) -> None:
        """Знак и payload quiet NaN сохраняются"""
        for bits in (0xFFC00000, 0x7FC00001, 0xFFFFFFFF):
            assert to_bits(from_bits(bits, FLOAT32), FLOAT32) == bits

    def test_nan_payload_lost_on_narrowing_stays_nan(self) -> None:
        """NaN binary64 с payload только в младших битах остаётся NaN"""
        value = from_bits(SNAN_BITS_64)
        bits = to_bits(value, FLOAT32)
        assert bits == CANONICAL_NAN_BITS_32
        assert math.isnan(from_bits(bits, FLOAT32))

    def test_subnormal_round_trip(self) -> None:
        """Субнормальные binary32 значения"""
        for bits in (0x00000001, 0x807FFFFF):
            assert to_bits(from_bits(bits, FLOAT32), FLOAT32) == bits

    def test_out_of_range(self) -> None:
        """Паттерн вне диапазона binary32"""
        with pytest.raises(ValueError, match="out of range"):
            from_bits(1 << 32, FLOAT32)


class TestRoundToFormat:
    """Тесты для round_to_format"""

    def test_float64_identity(self) -> None:
        """binary64 не изменяется"""
        assert round_to_format(0.1, FLOAT64) == 0.1

    def test_float32_rounding(self) -> None:
        """binary32 округляет к ближайшему"""
        assert round_to_format(0.1, FLOAT32) == 0.10000000149011612
        assert round_to_format(1.5, FLOAT32) == 1.5

    def test_float32_overflow_to_infinity(self) -> None:
        """Переполнение binary32 → ±inf"""
        assert round_to_format(1e300, FLOAT32) == INF
        assert round_to_format(-1e300, FLOAT32) == -INF

    def test_float32_keeps_negative_zero(self) -> None:
        """Знак нуля сохраняется"""
        assert sign_bit(round_to_format(-0.0, FLOAT32))

    def test_float32_nan(self) -> None:
        """NaN остаётся NaN"""
        assert math.isnan(round_to_format(NAN, FLOAT32))


# =============================================================================
# КАНОНИЧЕСКИЕ ПАТТЕРНЫ И HASH
# =============================================================================


class TestCanonicalBits:
    """Тесты для canonical_bits и float_hash"""

    def test_zeros_share_pattern(self) -> None:
        """±0.0 → один паттерн"""
        assert canonical_bits(-0.0) == canonical_bits(0.0) == 0

    def test_all_nans_share_pattern(self) -> None:
        """Все NaN → CANONICAL_NAN_BITS_64"""
        for value in (NAN, -NAN, from_bits(SNAN_BITS_64), from_bits(SNAN_BITS_32, FLOAT32)):
            assert canonical_bits(value) == CANONICAL_NAN_BITS_64

    def test_regular_values_keep_bits(self) -> None:
        """Обычные значения сохраняют собственные биты"""
        assert canonical_bits(1.0) == to_bits(1.0)
        assert canonical_bits(-INF) == to_bits(-INF)

    def test_hash_consistency(self) -> None:
        """Равные значения → равный hash"""
        assert float_hash(-0.0) == float_hash(0.0)
        assert float_hash(NAN) == float_hash(from_bits(SNAN_BITS_64))
        assert float_hash(1.5) == float_hash(round_to_format(1.5, FLOAT32))


# =============================================================================
# TOTAL ORDER
# =============================================================================


class TestTotalCmp:
    """Тесты для total_cmp"""

    def test_regular_values(self) -> None:
        """Обычные значения сравниваются нативно"""
        assert total_cmp(7.0, 7.0) == 0
        assert total_cmp(8.0, 7.0) == 1
        assert total_cmp(4.0, 7.0) == -1
        assert total_cmp(-INF, INF) == -1

    def test_zeros_equal(self) -> None:
        """-0.0 == +0.0"""
        assert total_cmp(-0.0, 0.0) == 0
        assert total_cmp(0.0, -0.0) == 0

    def test_nan_greatest(self) -> None:
        """NaN больше любого не-NaN значения"""
        assert total_cmp(NAN, INF) == 1
        assert total_cmp(NAN, -100000.0) == 1
        assert total_cmp(-100.0, NAN) == -1
        assert total_cmp(-NAN, -INF) == 1

    def test_nans_equal(self) -> None:
        """Все NaN равны"""
        assert total_cmp(NAN, NAN) == 0
        assert total_cmp(NAN, -NAN) == 0
        assert total_cmp(NAN, from_bits(SNAN_BITS_64)) == 0


# =============================================================================
# JSON ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestJsonNumber:
    """Тесты для to_json_number и from_json_number"""

    def test_non_finite_tokens(self) -> None:
        """Неконечные значения → строки"""
        assert to_json_number(NAN) == JSON_NAN
        assert to_json_number(from_bits(SNAN_BITS_64)) == "NaN"
        assert to_json_number(INF) == "Infinity"
        assert to_json_number(-INF) == "-Infinity"

    def test_finite_unchanged(self) -> None:
        """Конечные значения без изменений"""
        assert to_json_number(1.5) == 1.5
        assert sign_bit(to_json_number(-0.0))

    def test_tokens_parsed(self) -> None:
        """Строки → неконечные значения"""
        assert math.isnan(from_json_number("NaN"))
        assert from_json_number("Infinity") == INF
        assert from_json_number("-Infinity") == -INF
        assert from_json_number(2.5) == 2.5

    def test_unknown_token_rejected(self) -> None:
        """Прочие строки отклоняются"""
        with pytest.raises(ValueError, match="Unsupported non-finite token"):
            from_json_number("inf")
