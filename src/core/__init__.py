"""
Core numeric primitives, domain value types, and result types.

Leaf components with no dependency on each other: integer sequences,
dense matrices with owned buffers, and 3D vector algebra.
"""
