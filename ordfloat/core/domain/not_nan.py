"""
NotNan — float, гарантированно не являющийся NaN

Обёртка с инвариантом «значение никогда не NaN», проверяемым в каждой точке
конструирования. ±inf и ±0.0 допускаются и хранятся как есть (знак нуля
не канонизируется, но для порядка и hash -0.0 == +0.0).

КОНСТРУИРОВАНИЕ:
- NotNan(value) / NotNan.try_new(value): FloatIsNan для любого NaN payload
- NotNan.new_unchecked(value): без проверки, ответственность на вызывающем

АРИФМЕТИКА:
- Унарные -, +, abs не порождают NaN → конструирование без проверки
- Бинарные операции перепроверяют результат (inf - inf, 0 * inf, 0 / 0,
  inf / inf, x % 0 дают NaN) → FloatIsNan

Ошибка никогда не подменяется значением (clamp, 0.0, inf): решение о
fallback принимает вызывающий код.
"""

import logging
from typing import Final

from ordfloat.core.domain.base import FloatWrapper
from ordfloat.core.domain.ordered_float import OrderedFloat
from ordfloat.core.math.canonical import FLOAT64, FloatFormat, is_nan, round_to_format

_LOGGER = logging.getLogger(__name__)

NAN_REJECTED_MESSAGE: Final[str] = "NaN encountered in NotNan construction"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FloatIsNan(ValueError):
    """
    Отказ в конструировании NotNan: значение является NaN.

    Единственный вид ошибки модуля. Не несёт payload: условие детерминировано
    и полностью определяется входным значением, повтор бессмысленен.
    """

    def __init__(self, message: str = NAN_REJECTED_MESSAGE) -> None:
        super().__init__(message)


# =============================================================================
# NOT NAN
# =============================================================================


class NotNan(FloatWrapper):
    """
    Float без NaN с total order (нативный порядок).

    Immutable. Проверку обходит только new_unchecked.
    """

    def __post_init__(self) -> None:
        super().__post_init__()
        if is_nan(self.value):
            _LOGGER.debug("NaN rejected by NotNan (%s)", self.fmt.name)
            raise FloatIsNan()

    @classmethod
    def try_new(cls, value: float, fmt: FloatFormat = FLOAT64) -> "NotNan":
        """
        Проверяющий конструктор.

        Args:
            value: Любое значение, приводимое к float (включая обёртки)
            fmt: Формат IEEE-754 (default: FLOAT64)

        Returns:
            NotNan со значением value (±inf и ±0.0 без изменений)

        Raises:
            FloatIsNan: Если value является NaN

        Examples:
            >>> NotNan.try_new(1.5)
            NotNan(1.5)
            >>> NotNan.try_new(float("nan"))  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            FloatIsNan: NaN encountered in NotNan construction
        """
        return cls(value, fmt)

    @classmethod
    def new_unchecked(cls, value: float, fmt: FloatFormat = FLOAT64) -> "NotNan":
        """
        Конструирование без проверки на NaN.

        ПРЕДУСЛОВИЕ: value не является NaN. Проверка не выполняется,
        за нарушение предусловия отвечает вызывающий код.
        Сравнение и hash такого экземпляра остаются определёнными
        (NaN упорядочивается как в OrderedFloat).
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", round_to_format(float(value), fmt))
        object.__setattr__(instance, "fmt", fmt)
        return instance

    @classmethod
    def _admit(cls, value: float, fmt: FloatFormat) -> "NotNan":
        return cls.try_new(value, fmt)

    @classmethod
    def _admit_trusted(cls, value: float, fmt: FloatFormat) -> "NotNan":
        return cls.new_unchecked(value, fmt)

    def to_ordered(self) -> OrderedFloat:
        """Конверсия в OrderedFloat без потерь (биты и формат сохраняются)."""
        return OrderedFloat(self.value, self.fmt)
