"""
Test suite for rational64

Contains:
- tests/unit/          : Unit tests for individual modules
"""
