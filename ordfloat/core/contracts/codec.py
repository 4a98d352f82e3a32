"""
Codec — побитово точное JSON-представление обёрток

Формат (контракты ordered_float.json / not_nan.json):
    {
        "schema_version": "1",
        "kind": "ordered_float" | "not_nan",
        "width": 32 | 64,
        "bits": "<hex, width/4 цифр>",
        "value": <number> | "NaN" | "Infinity" | "-Infinity"
    }

Декодирование использует только bits: NaN payload и знак нуля сохраняются.
Поле value информационное (JSON не имеет литералов NaN/Infinity).
NotNan декодируется через проверяющий конструктор, поэтому NaN-паттерн
в not_nan контракте даёт FloatIsNan.
"""

from typing import Any, Dict, Final, Union

from ordfloat.core.contracts.validators import (
    ContractValidator,
    NotNanValidator,
    OrderedFloatValidator,
)
from ordfloat.core.domain.base import FloatWrapper
from ordfloat.core.domain.not_nan import NotNan
from ordfloat.core.domain.ordered_float import OrderedFloat
from ordfloat.core.math.canonical import FloatFormat, to_json_number

SCHEMA_VERSION: Final[str] = "1"

KIND_ORDERED_FLOAT: Final[str] = "ordered_float"
KIND_NOT_NAN: Final[str] = "not_nan"

# Схемы загружаются один раз при импорте
_ORDERED_FLOAT_VALIDATOR: Final[ContractValidator] = OrderedFloatValidator()
_NOT_NAN_VALIDATOR: Final[ContractValidator] = NotNanValidator()


def _kind_of(wrapper: FloatWrapper) -> str:
    if isinstance(wrapper, NotNan):
        return KIND_NOT_NAN
    if isinstance(wrapper, OrderedFloat):
        return KIND_ORDERED_FLOAT
    raise TypeError(f"Cannot encode {type(wrapper).__name__}")


def _validator_for(kind: Any) -> ContractValidator:
    if kind == KIND_NOT_NAN:
        return _NOT_NAN_VALIDATOR
    # Неизвестный kind отклоняется схемой ordered_float (const)
    return _ORDERED_FLOAT_VALIDATOR


def encode(wrapper: FloatWrapper) -> Dict[str, Any]:
    """
    Кодирование обёртки в JSON-совместимый dict.

    Raises:
        TypeError: Если wrapper не OrderedFloat и не NotNan
    """
    kind = _kind_of(wrapper)
    fmt = wrapper.fmt
    return {
        "schema_version": SCHEMA_VERSION,
        "kind": kind,
        "width": fmt.width,
        "bits": f"{wrapper.to_bits():0{fmt.width // 4}x}",
        "value": to_json_number(wrapper.value),
    }


def decode(data: Dict[str, Any]) -> Union[OrderedFloat, NotNan]:
    """
    Декодирование dict в обёртку.

    Raises:
        ValidationError: Если данные не соответствуют контракту
        FloatIsNan: Если not_nan контракт содержит NaN-паттерн
    """
    kind = data.get("kind") if isinstance(data, dict) else None
    _validator_for(kind).validate(data)

    fmt = FloatFormat.for_width(data["width"])
    bits = int(data["bits"], 16)
    if kind == KIND_NOT_NAN:
        return NotNan.from_bits(bits, fmt)
    return OrderedFloat.from_bits(bits, fmt)
