"""
Test suite for mathcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
