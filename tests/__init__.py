"""
Test suite for ordfloat

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
