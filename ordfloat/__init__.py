"""
ordfloat — total order, equality and hashing for IEEE-754 floats.

- OrderedFloat: NaN допускается, упорядочен как наибольшее значение
- NotNan: NaN запрещён при конструировании (FloatIsNan)
"""

import logging

from ordfloat.core.domain import FloatIsNan, NotNan, OrderedFloat
from ordfloat.core.math import FLOAT32, FLOAT64, FloatFormat

# Библиотека не пишет логи, пока приложение не настроит logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FLOAT32",
    "FLOAT64",
    "FloatFormat",
    "FloatIsNan",
    "NotNan",
    "OrderedFloat",
]
