"""
IEEE Ops — арифметика с семантикой IEEE-754 для деления на ноль

Нативный Python float выбрасывает ZeroDivisionError там, где IEEE-754
возвращает бесконечность или NaN. Обёртки делегируют сюда, чтобы арифметика
оставалась тотальной, а NaN-результаты проверялись там, где это требуется
(NotNan).

ПРАВИЛА:
    x / ±0   → ±inf (знак = sign(x) * sign(0)), x ≠ 0 и x не NaN
    0 / 0    → NaN
    NaN / 0  → NaN
    x // 0   → floor(x / 0) (±inf или NaN)
    x % 0    → NaN
"""

import math


def ieee_divide(a: float, b: float) -> float:
    """
    Деление по IEEE-754.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def ieee_floordiv(a: float, b: float) -> float:
    """Целочисленное деление; при нулевом делителе → ieee_divide (±inf или NaN)."""
    if b != 0.0:
        return a // b
    return ieee_divide(a, b)


def ieee_mod(a: float, b: float) -> float:
    """Остаток от деления; при нулевом делителе → NaN."""
    if b != 0.0:
        return a % b
    return math.nan
