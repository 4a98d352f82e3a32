"""
OrderedFloat — float с total order, NaN допускается

Обёртка над любым float (любой битовый паттерн, включая ±inf, ±0.0 и
любой NaN payload). Конструирование всегда успешно.

СЕМАНТИКА:
- Порядок: нативный для не-NaN значений; -0.0 == +0.0; NaN больше любого
  не-NaN значения (включая +inf); все NaN равны между собой
- Равенство совпадает с порядком, поэтому рефлексивно (NaN == NaN)
- Hash: -0.0 → +0.0, любой NaN → канонический паттерн
- Арифметика: делегирование float, NaN-результат допустим

Examples:
    >>> sorted(OrderedFloat(x) for x in [3.0, float("nan"), -1.0])
    [OrderedFloat(-1.0), OrderedFloat(3.0), OrderedFloat(nan)]
    >>> OrderedFloat(float("nan")) == OrderedFloat(float("nan"))
    True
"""

from ordfloat.core.domain.base import FloatWrapper
from ordfloat.core.math.canonical import FLOAT64, FloatFormat


class OrderedFloat(FloatWrapper):
    """
    Float с total order и рефлексивным равенством.

    NaN сортируется как наибольшее значение и равен сам себе,
    в отличие от стандарта IEEE-754.
    """

    @classmethod
    def _admit(cls, value: float, fmt: FloatFormat) -> "OrderedFloat":
        return cls(value, fmt)

    @classmethod
    def nan(cls, fmt: FloatFormat = FLOAT64) -> "OrderedFloat":
        """Канонический quiet NaN формата fmt."""
        return cls.from_bits(fmt.canonical_nan_bits, fmt)
