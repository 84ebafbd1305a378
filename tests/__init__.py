"""
Test suite for decutil

Contains:
- tests/unit/          : Unit tests for conversions, settings and contracts
"""
