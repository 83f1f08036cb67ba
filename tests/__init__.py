"""
Test suite for decnum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
