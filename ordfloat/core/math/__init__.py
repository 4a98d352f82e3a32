"""
Core math modules для ordfloat

Канонизация IEEE-754 значений и арифметика с семантикой IEEE.
"""

# Canonical (total order, hashing, bits)
from ordfloat.core.math.canonical import (
    # Constants
    CANONICAL_NAN_BITS_32,
    CANONICAL_NAN_BITS_64,
    # Formats
    FLOAT32,
    FLOAT64,
    FloatFormat,
    # Classification & canonicalization
    canonical_bits,
    canonicalize_zero,
    is_nan,
    # Bits
    from_bits,
    round_to_format,
    to_bits,
    # Total order
    float_hash,
    total_cmp,
    # JSON
    JSON_INFINITY,
    JSON_NAN,
    JSON_NEG_INFINITY,
    JSON_NON_FINITE,
    from_json_number,
    to_json_number,
)

# IEEE arithmetic
from ordfloat.core.math.ieee_ops import ieee_divide, ieee_floordiv, ieee_mod

__all__ = [
    # Canonical — Constants
    "CANONICAL_NAN_BITS_32",
    "CANONICAL_NAN_BITS_64",
    # Canonical — Formats
    "FLOAT32",
    "FLOAT64",
    "FloatFormat",
    # Canonical — Classification & canonicalization
    "canonical_bits",
    "canonicalize_zero",
    "is_nan",
    # Canonical — Bits
    "from_bits",
    "round_to_format",
    "to_bits",
    # Canonical — Total order
    "float_hash",
    "total_cmp",
    # Canonical — JSON
    "JSON_INFINITY",
    "JSON_NAN",
    "JSON_NEG_INFINITY",
    "JSON_NON_FINITE",
    "from_json_number",
    "to_json_number",
    # IEEE Ops
    "ieee_divide",
    "ieee_floordiv",
    "ieee_mod",
]
