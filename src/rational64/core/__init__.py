"""
Core domain model, integer primitives, and contracts.

This package is independent of any I/O: every operation is a pure function
over immutable values.
"""
