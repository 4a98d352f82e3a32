"""
FloatWrapper — Общая основа обёрток OrderedFloat и NotNan

Immutable value-объект (frozen dataclass) вокруг одного float заданного
формата. Содержит всё, что у обёрток совпадает:
- Сравнение через total_cmp (total order) и согласованный с ним hash
- Конверсии и форматирование (делегирование нативному float)
- Арифметику (делегирование нативному float / ieee_ops)
- Интеграцию с Pydantic V2 (core schema)

Подкласс определяет только политику допуска результата (_admit):
OrderedFloat принимает любой результат, NotNan перепроверяет его на NaN.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a == b  ⇔  total_cmp(a.value, b.value) == 0
2. a == b  ⇒  hash(a) == hash(b)
3. Хранимое значение не канонизируется: биты доступны через to_bits()
"""

import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ordfloat.core.math.canonical import (
    FLOAT64,
    JSON_NON_FINITE,
    FloatFormat,
    float_hash,
    from_bits,
    from_json_number,
    is_nan,
    round_to_format,
    to_bits,
    to_json_number,
    total_cmp,
)
from ordfloat.core.math.ieee_ops import ieee_divide, ieee_floordiv, ieee_mod

Number = Union[int, float]


def _as_float(value: Any) -> float:
    # Обёртка отдаёт свой float напрямую, остальное через float()
    if isinstance(value, FloatWrapper):
        return value.value
    return float(value)


def _wider(a: FloatFormat, b: FloatFormat) -> FloatFormat:
    return a if a.width >= b.width else b


def _serialize(instance: "FloatWrapper", info: core_schema.SerializationInfo) -> Any:
    if info.mode_is_json():
        return to_json_number(instance.value)
    return instance.value


@dataclass(frozen=True, eq=False, repr=False)
class FloatWrapper:
    """
    Базовая обёртка float с total order.

    Не используется напрямую, только через OrderedFloat и NotNan.

    Attributes:
        value: Хранимое значение (Python float, округлённое до fmt)
        fmt: Формат IEEE-754 (default: FLOAT64)
    """

    value: float
    fmt: FloatFormat = FLOAT64

    def __post_init__(self) -> None:
        if type(self) is FloatWrapper:
            raise TypeError(
                "FloatWrapper cannot be instantiated directly, use OrderedFloat or NotNan"
            )
        if not isinstance(self.fmt, FloatFormat):
            raise TypeError(f"fmt must be a FloatFormat, got {type(self.fmt).__name__}")
        object.__setattr__(self, "value", round_to_format(_as_float(self.value), self.fmt))

    # -------------------------------------------------------------------------
    # Политика допуска результатов (переопределяется в подклассах)
    # -------------------------------------------------------------------------

    @classmethod
    def _admit(cls, value: float, fmt: FloatFormat) -> "FloatWrapper":
        """Конструирование результата бинарной операции."""
        raise NotImplementedError

    @classmethod
    def _admit_trusted(cls, value: float, fmt: FloatFormat) -> "FloatWrapper":
        """Конструирование результата операции, заведомо не порождающей NaN."""
        return cls._admit(value, fmt)

    # -------------------------------------------------------------------------
    # Сравнение и hashing
    # -------------------------------------------------------------------------

    def cmp(self, other: "FloatWrapper") -> int:
        """
        Total order сравнение.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other

        Raises:
            TypeError: Если other не является обёрткой float
        """
        if not isinstance(other, FloatWrapper):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return total_cmp(self.value, other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatWrapper):
            return NotImplemented
        return total_cmp(self.value, other.value) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FloatWrapper):
            return NotImplemented
        return total_cmp(self.value, other.value) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FloatWrapper):
            return NotImplemented
        return total_cmp(self.value, other.value) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FloatWrapper):
            return NotImplemented
        return total_cmp(self.value, other.value) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FloatWrapper):
            return NotImplemented
        return total_cmp(self.value, other.value) >= 0

    def __hash__(self) -> int:
        return float_hash(self.value)

    # -------------------------------------------------------------------------
    # Конверсии и инспекция
    # -------------------------------------------------------------------------

    def into_inner(self) -> float:
        """Хранимое значение без изменений (побитово)."""
        return self.value

    def to_bits(self) -> int:
        """Битовое представление в формате fmt."""
        return to_bits(self.value, self.fmt)

    @classmethod
    def from_bits(cls, bits: int, fmt: FloatFormat = FLOAT64) -> "FloatWrapper":
        """Конструирование по битовому представлению формата fmt."""
        return cls(from_bits(bits, fmt), fmt)

    def is_nan(self) -> bool:
        return is_nan(self.value)

    def is_finite(self) -> bool:
        return math.isfinite(self.value)

    def is_infinite(self) -> bool:
        return math.isinf(self.value)

    def is_sign_negative(self) -> bool:
        """Знаковый бит установлен (различает -0.0 и +0.0, учитывает знак NaN)."""
        return math.copysign(1.0, self.value) < 0

    def is_sign_positive(self) -> bool:
        return not self.is_sign_negative()

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    def __trunc__(self) -> int:
        return math.trunc(self.value)

    def __floor__(self) -> int:
        return math.floor(self.value)

    def __ceil__(self) -> int:
        return math.ceil(self.value)

    def __round__(self, ndigits: Optional[int] = None) -> Number:
        return round(self.value, ndigits)

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        if self.fmt == FLOAT64:
            return f"{type(self).__name__}({self.value!r})"
        return f"{type(self).__name__}({self.value!r}, fmt={self.fmt.name})"

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _binary(
        self,
        other: object,
        op: Callable[[float, float], float],
        reflected: bool = False,
    ) -> "FloatWrapper":
        if isinstance(other, FloatWrapper):
            other_value = other.value
            fmt = _wider(self.fmt, other.fmt)
        elif isinstance(other, (int, float)):
            other_value = float(other)
            fmt = self.fmt
        else:
            return NotImplemented

        if reflected:
            result = op(other_value, self.value)
        else:
            result = op(self.value, other_value)
        return self._admit(result, fmt)

    def __add__(self, other: object) -> "FloatWrapper":
        return self._binary(other, operator.add)

    def __radd__(self, other: object) -> "FloatWrapper":
        return self._binary(other, operator.add, reflected=True)

    def __sub__(self, other: object) -> "FloatWrapper":
        return self._binary(other, operator.sub)

    def __rsub__(self, other: object) -> "FloatWrapper":
        return self._binary(other, operator.sub, reflected=True)

    def __mul__(self, other: object) -> "FloatWrapper":
        return self._binary(other, operator.mul)

    def __rmul__(self, other: object) -> "FloatWrapper":
        return self._binary(other, operator.mul, reflected=True)

    def __truediv__(self, other: object) -> "FloatWrapper":
        return self._binary(other, ieee_divide)

    def __rtruediv__(self, other: object) -> "FloatWrapper":
        return self._binary(other, ieee_divide, reflected=True)

    def __floordiv__(self, other: object) -> "FloatWrapper":
        return self._binary(other, ieee_floordiv)

    def __rfloordiv__(self, other: object) -> "FloatWrapper":
        return self._binary(other, ieee_floordiv, reflected=True)

    def __mod__(self, other: object) -> "FloatWrapper":
        return self._binary(other, ieee_mod)

    def __rmod__(self, other: object) -> "FloatWrapper":
        return self._binary(other, ieee_mod, reflected=True)

    def __neg__(self) -> "FloatWrapper":
        return self._admit_trusted(-self.value, self.fmt)

    def __pos__(self) -> "FloatWrapper":
        return self

    def __abs__(self) -> "FloatWrapper":
        return self._admit_trusted(abs(self.value), self.fmt)

    # -------------------------------------------------------------------------
    # Pydantic V2
    # -------------------------------------------------------------------------

    @classmethod
    def pydantic_core_schema(cls, fmt: FloatFormat = FLOAT64) -> core_schema.CoreSchema:
        """
        Core schema для использования обёртки как поля Pydantic модели.

        - Python: экземпляр любой обёртки или число → cls(value, fmt)
        - JSON: number или строка "NaN" / "Infinity" / "-Infinity" → cls(value, fmt)
        - Сериализация: хранимый float; в JSON режиме неконечные значения
          пишутся строками (to_json_number), иначе JSON получил бы null

        Ошибки конструирования (например, FloatIsNan) становятся ValidationError.
        """

        def admit(value: Any) -> "FloatWrapper":
            return cls(value, fmt)

        from_number = core_schema.no_info_after_validator_function(
            admit, core_schema.float_schema(allow_inf_nan=True)
        )
        from_token = core_schema.no_info_after_validator_function(
            lambda token: admit(from_json_number(token)),
            core_schema.literal_schema(list(JSON_NON_FINITE)),
        )
        from_wrapper = core_schema.no_info_after_validator_function(
            admit, core_schema.is_instance_schema(FloatWrapper)
        )
        return core_schema.json_or_python_schema(
            json_schema=core_schema.union_schema([from_number, from_token]),
            python_schema=core_schema.union_schema([from_wrapper, from_number]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return cls.pydantic_core_schema()
