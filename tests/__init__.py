"""
Test suite for array-processor

Contains:
- tests/unit/          : Unit tests for individual modules
"""
