"""
Contract Validation Module

Модуль для валидации и кодирования JSON-представления обёрток float.
"""

from .codec import KIND_NOT_NAN, KIND_ORDERED_FLOAT, SCHEMA_VERSION, decode, encode
from .validators import (
    ContractValidator,
    NotNanValidator,
    OrderedFloatValidator,
    SchemaLoader,
    validate_not_nan,
    validate_ordered_float,
)

__all__ = [
    # Constants
    "SCHEMA_VERSION",
    "KIND_ORDERED_FLOAT",
    "KIND_NOT_NAN",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderedFloatValidator",
    "NotNanValidator",
    # Functions
    "validate_ordered_float",
    "validate_not_nan",
    "encode",
    "decode",
]
