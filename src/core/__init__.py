"""
Core array primitives and value objects.

This package is pure in-process computation with no I/O.
"""
