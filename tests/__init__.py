"""
Test suite for the numeric primitives core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
