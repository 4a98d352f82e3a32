"""
Domain value objects.

Contains the float wrappers OrderedFloat and NotNan and their pydantic
field annotations.
"""

from ordfloat.core.domain.base import FloatWrapper
from ordfloat.core.domain.fields import (
    NotNan32,
    NotNan64,
    OrderedFloat32,
    OrderedFloat64,
    WithFormat,
)
from ordfloat.core.domain.not_nan import NAN_REJECTED_MESSAGE, FloatIsNan, NotNan
from ordfloat.core.domain.ordered_float import OrderedFloat

__all__ = [
    # Base
    "FloatWrapper",
    # OrderedFloat
    "OrderedFloat",
    # NotNan
    "NAN_REJECTED_MESSAGE",
    "FloatIsNan",
    "NotNan",
    # Pydantic fields
    "WithFormat",
    "OrderedFloat32",
    "OrderedFloat64",
    "NotNan32",
    "NotNan64",
]
