"""
vectorix: an immutable Euclidean vector value type.

    from vectorix import Vector

    Vector([1, 2, 3]).dot_product(Vector([4, 5, 6]))   # 32
    Vector([3, 4]).length()                            # 5.0
    Vector([1, 0]).project_onto(Vector([1, 1]))        # ~Vector(0.5, 0.5)
"""

__version__ = '0.1.0'

from vectorix.errors import (
    VectorError,
    InvalidArgument,
    DimensionMismatch,
    KeyMismatch,
    DivisionByZero,
)
from vectorix.vector import Vector
