# vectorix/vector.py
import logging
import math
import numbers
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from vectorix.errors import DimensionMismatch, DivisionByZero, InvalidArgument, KeyMismatch

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Tolerances used by Vector.is_close when none are given.
DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12


class Vector:
    """
    An immutable Euclidean vector of arbitrary dimension.

    Instances never change state. Every operation returns a new vector built
    from a fresh tuple of components, so operands are never aliased.
    """
    __slots__ = ("_components",)

    # Keeps numpy scalars from treating a Vector as a sequence in binary operators.
    __array_ufunc__ = None

    def __init__(self, components: Iterable[Number]):
        object.__setattr__(self, "_components", tuple(components))

    @classmethod
    def null_vector(cls, dimension: int) -> "Vector":
        """
        Creates the zero vector of the given dimension. The dimension must be at least 0.
        """
        if dimension < 0:
            logger.debug("null_vector called with dimension %r", dimension)
            raise InvalidArgument("Dimension must be zero or greater")
        return cls([0] * dimension)

    # --- Accessors ---

    def components(self) -> Tuple[Number, ...]:
        return self._components

    def dimension(self) -> int:
        return len(self._components)

    def length(self) -> float:
        """
        Euclidean norm of the vector; 0.0 for the empty vector.
        """
        return math.hypot(*self._components)

    def as_array(self) -> np.ndarray:
        """
        Returns the components as a new float array. Writing to the array does
        not affect the vector.
        """
        return np.array(self._components, dtype=float)

    # --- Equality ---

    def is_equal(self, other: "Vector") -> bool:
        """
        True if both vectors hold the same values in the same order.
        Comparison is by value, so 2 and 2.0 are equal components. Tuple
        comparison checks identity first, so a NaN component only matches
        the very same NaN object.
        """
        return self._components == other._components

    def is_close(self, other: "Vector", rel_tol: float = DEFAULT_REL_TOL,
                 abs_tol: float = DEFAULT_ABS_TOL) -> bool:
        """
        Component-wise math.isclose. Raises the same errors as add() when the
        vectors are not in the same vector space.
        """
        self._check_vector_space(other)
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self._components, other._components)
        )

    # --- Arithmetic (all return new vectors) ---

    def add(self, other: "Vector") -> "Vector":
        self._check_vector_space(other)
        return type(self)(a + b for a, b in zip(self._components, other._components))

    def subtract(self, other: "Vector") -> "Vector":
        return self.add(other.multiply_by_scalar(-1))

    def dot_product(self, other: "Vector") -> Number:
        """
        Scalar product of the two vectors.
        """
        self._check_vector_space(other)
        product = 0
        for a, b in zip(self._components, other._components):
            product += a * b
        return product

    def multiply_by_scalar(self, scalar: Number) -> "Vector":
        return type(self)(c * scalar for c in self._components)

    def divide_by_scalar(self, scalar: Number) -> "Vector":
        if scalar == 0:
            logger.debug("divide_by_scalar called with zero on %r", self)
            raise DivisionByZero("Cannot divide by zero")
        return self.multiply_by_scalar(1.0 / scalar)

    def normalize(self) -> "Vector":
        """
        Returns the unit vector pointing in the same direction.

        Raises DivisionByZero for a zero-length vector, which has no direction.
        """
        return self.divide_by_scalar(self.length())

    def project_onto(self, other: "Vector") -> "Vector":
        """
        Vector projection of this vector onto `other`.

        Raises DivisionByZero if `other` has zero length, and DimensionMismatch
        or KeyMismatch if the vectors are not in the same vector space.
        """
        unit = other.normalize()
        return unit.multiply_by_scalar(self.dot_product(unit))

    def cross(self, other: "Vector") -> "Vector":
        """
        Cross product. Only defined for 3-dimensional vectors.
        """
        if self.dimension() != 3 or other.dimension() != 3:
            logger.debug("cross called on dimensions %d and %d",
                         self.dimension(), other.dimension())
            raise DimensionMismatch("The cross product requires 3-dimensional vectors")
        self._check_vector_space(other)
        ax, ay, az = self._components
        bx, by, bz = other._components
        return type(self)((
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        ))

    def _keys(self) -> range:
        return range(len(self._components))

    def _check_vector_space(self, other: "Vector") -> None:
        """
        Checks that both vectors have the same dimension and the same component keys.
        """
        if self.dimension() != other.dimension():
            logger.debug("dimension mismatch: %d != %d", self.dimension(), other.dimension())
            raise DimensionMismatch("The vectors must be of the same dimension")
        if list(self._keys()) != list(other._keys()):
            logger.debug("key mismatch between %r and %r", self, other)
            raise KeyMismatch("The vectors' components must have the same keys")

    # --- Operators ---

    def __add__(self, other):
        if isinstance(other, Vector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return self.subtract(other)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return self.multiply_by_scalar(-1)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self.multiply_by_scalar(other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return self.divide_by_scalar(other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return self.dot_product(other)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, Vector):
            return self.is_equal(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._components)

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._components)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._components[index])
        return self._components[index]

    # --- Immutability ---

    def __setattr__(self, name, value):
        raise AttributeError("Vector is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vector is immutable")

    def __reduce__(self):
        return (self.__class__, (self._components,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self._components)})"
