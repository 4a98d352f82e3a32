"""
Core primitives, float wrappers and JSON contracts.

This module is independent of any application: it only depends on the
native float representation, pydantic and jsonschema.
"""
