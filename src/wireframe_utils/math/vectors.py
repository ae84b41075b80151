"""Define classes and functions to represent and manipulate 2D and 3D vectors."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING, Final, Union, overload

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from numpy.typing import NDArray


class DimensionMismatchError(ValueError):
    """An error raised when an operation receives vectors of incompatible dimensionality."""


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide two floats using IEEE semantics (x/0 gives inf or NaN instead of raising)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


@dataclass(eq=False)
class Vector2D:
    """An (x,y) vector on the 2D plane."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the vector's (x,y) components."""
        yield from astuple(self)

    def __eq__(self, other: object) -> bool:
        """Compare two vectors structurally (same dimensionality and components)."""
        if not isinstance(other, (Vector2D, Vector3D)):
            return NotImplemented
        return not is_3d(other) and self.x == other.x and self.y == other.y

    def __str__(self) -> str:
        """Render the vector as an (x, y) string."""
        return f"({self.x}, {self.y})"

    def __add__(self, other: Vector2D) -> Vector2D:
        return self.copy().add_in_place(other)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return self.copy().subtract_in_place(other)

    def __mul__(self, coefficient: float) -> Vector2D:
        return self.copy().scale_in_place(coefficient)

    def __rmul__(self, coefficient: float) -> Vector2D:
        return self * coefficient

    def __neg__(self) -> Vector2D:
        return self * -1

    @classmethod
    def zero(cls) -> Vector2D:
        """Construct the 2D zero vector."""
        return Vector2D(0.0, 0.0)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector2D:
        """Construct a Vector2D from a NumPy array."""
        if arr.shape != (2,):
            raise ValueError(f"Cannot construct Vector2D from an array of shape {arr.shape}.")

        return cls(float(arr[0]), float(arr[1]))

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Vector2D:
        """Construct a Vector2D from a sequence (e.g., list or tuple) of values."""
        if len(values) != 2:
            raise ValueError(f"Vector2D expects 2 values, got {len(values)}")
        return cls(float(values[0]), float(values[1]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the 2D vector into a NumPy array."""
        return np.array([self.x, self.y], dtype=np.float64)

    def copy(self) -> Vector2D:
        """Create a shallow copy of the vector."""
        return Vector2D(self.x, self.y)

    def dot(self, other: Vector2D) -> float:
        """Compute the dot product of this vector with another 2D vector."""
        if is_3d(other):
            raise DimensionMismatchError(f"Cannot dot the 2D vector {self} with 3D vector {other}")
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Compute the Euclidean length of the vector."""
        return float(np.sqrt(self.dot(self)))

    def scale_in_place(self, coefficient: float) -> Vector2D:
        """Multiply every component by the given coefficient, mutating this vector."""
        self.x *= coefficient
        self.y *= coefficient
        return self

    def add_in_place(self, delta: Vector2D) -> Vector2D:
        """Add the given 2D vector onto this vector, mutating this vector."""
        if is_3d(delta):
            raise DimensionMismatchError(f"Adding 3D vector {delta} to 2D vector {self} drops z")
        self.x += delta.x
        self.y += delta.y
        return self

    def subtract_in_place(self, delta: Vector2D) -> Vector2D:
        """Subtract the given 2D vector from this vector, mutating this vector."""
        if is_3d(delta):
            raise DimensionMismatchError(f"Subtracting 3D {delta} from 2D vector {self} drops z")
        self.x -= delta.x
        self.y -= delta.y
        return self

    def normalized(self) -> Vector2D:
        """Compute a new unit vector in the direction of this vector.

        A zero vector has no direction, so its normalization has NaN components.
        """
        length = self.magnitude()
        return Vector2D(safe_divide(self.x, length), safe_divide(self.y, length))

    def approx_equal(self, other: Vector2D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Vector2D is approximately equal to this one."""
        if is_3d(other):
            return False
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))


@dataclass(eq=False)
class Vector3D:
    """An (x,y,z) vector in 3D space.

    The absolute frame used throughout the package has x pointing right, y pointing
    down, and z pointing out of the screen.
    """

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the vector's (x,y,z) components."""
        yield from astuple(self)

    def __eq__(self, other: object) -> bool:
        """Compare two vectors structurally (same dimensionality and components)."""
        if not isinstance(other, (Vector2D, Vector3D)):
            return NotImplemented
        return is_3d(other) and self.x == other.x and self.y == other.y and self.z == other.z

    def __str__(self) -> str:
        """Render the vector as an (x, y, z) string."""
        return f"({self.x}, {self.y}, {self.z})"

    def __add__(self, other: Vector) -> Vector3D:
        return self.copy().add_in_place(other)

    def __sub__(self, other: Vector) -> Vector3D:
        return self.copy().subtract_in_place(other)

    def __mul__(self, coefficient: float) -> Vector3D:
        return self.copy().scale_in_place(coefficient)

    def __rmul__(self, coefficient: float) -> Vector3D:
        return self * coefficient

    def __neg__(self) -> Vector3D:
        return self * -1

    @classmethod
    def zero(cls) -> Vector3D:
        """Construct a new (mutable) 3D zero vector."""
        return Vector3D(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector3D:
        """Construct a Vector3D from a NumPy array."""
        if arr.shape == (3, 1):
            arr = arr.reshape(3)

        if arr.shape != (3,):
            raise ValueError(f"Cannot construct Vector3D from an array of shape {arr.shape}.")

        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Vector3D:
        """Construct a Vector3D from a sequence (e.g., list or tuple) of values."""
        if len(values) != 3:
            raise ValueError(f"Vector3D expects 3 values, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the 3D vector into a NumPy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def copy(self) -> Vector3D:
        """Create a shallow (and always mutable) copy of the vector."""
        return Vector3D(self.x, self.y, self.z)

    def dot(self, other: Vector3D) -> float:
        """Compute the dot product of this vector with another 3D vector."""
        if not is_3d(other):
            raise DimensionMismatchError(f"Cannot dot the 3D vector {self} with 2D vector {other}")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        """Compute the Euclidean length of the vector."""
        return float(np.sqrt(self.dot(self)))

    def scale_in_place(self, coefficient: float) -> Vector3D:
        """Multiply every component by the given coefficient, mutating this vector."""
        self.x *= coefficient
        self.y *= coefficient
        self.z *= coefficient
        return self

    def add_in_place(self, delta: Vector) -> Vector3D:
        """Add the given vector onto this vector, mutating this vector.

        A 2D delta has no z component, so it only shifts x and y.
        """
        self.x += delta.x
        self.y += delta.y
        if is_3d(delta):
            self.z += delta.z
        return self

    def subtract_in_place(self, delta: Vector) -> Vector3D:
        """Subtract the given vector from this vector, mutating this vector.

        A 2D delta has no z component, so it only shifts x and y.
        """
        self.x -= delta.x
        self.y -= delta.y
        if is_3d(delta):
            self.z -= delta.z
        return self

    def normalized(self) -> Vector3D:
        """Compute a new unit vector in the direction of this vector.

        A zero vector has no direction, so its normalization has NaN components.
        """
        length = self.magnitude()
        return Vector3D(
            safe_divide(self.x, length),
            safe_divide(self.y, length),
            safe_divide(self.z, length),
        )

    def cross(self, other: Vector3D) -> Vector3D:
        """Compute the right-handed cross product of this vector with another 3D vector.

        Reference: https://mathworld.wolfram.com/CrossProduct.html
        """
        if not is_3d(other):
            raise DimensionMismatchError(f"Cross product requires 3D vectors, got {other}")
        return Vector3D(
            self.y * other.z - other.y * self.z,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def approx_equal(self, other: Vector3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Vector3D is approximately equal to this one."""
        if not is_3d(other):
            return False
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))


Vector = Union[Vector2D, Vector3D]
"""A vector of either dimensionality."""


class _ReadOnlyVector3D(Vector3D):
    """A Vector3D whose components cannot be reassigned once initialized."""

    def __setattr__(self, name: str, value: object) -> None:
        if name in self.__dict__:
            raise AttributeError(f"Cannot modify component '{name}' of the read-only vector {self}")
        super().__setattr__(name, value)


ZERO: Final[Vector3D] = _ReadOnlyVector3D(0.0, 0.0, 0.0)
"""Shared read-only 3D zero vector; use `Vector3D.zero()` for a mutable one."""


@overload
def point(x: float, y: float) -> Vector2D: ...


@overload
def point(x: float, y: float, z: float) -> Vector3D: ...


def point(x: float, y: float, z: float | None = None) -> Vector:
    """Construct a 2D vector, or a 3D vector if a z-coordinate is given."""
    if z is None:
        return Vector2D(float(x), float(y))
    return Vector3D(float(x), float(y), float(z))


def is_3d(vector: Vector) -> bool:
    """Evaluate whether the given vector is three-dimensional."""
    return isinstance(vector, Vector3D)


def is_zero(vector: Vector) -> bool:
    """Evaluate whether every component of the given vector is exactly zero."""
    return vector is ZERO or all(component == 0 for component in vector)


def clone(vector: Vector) -> Vector:
    """Create a shallow copy of the given vector with the same dimensionality."""
    return vector.copy()


def to_tuple(vector: Vector) -> tuple[float, ...]:
    """Convert the vector into a tuple of its components, ordered (x, y[, z])."""
    return tuple(vector)


def dot(a: Vector, b: Vector) -> float:
    """Compute the dot product of two vectors of the same dimensionality."""
    return a.dot(b)


def magnitude(vector: Vector) -> float:
    """Compute the Euclidean length of the given vector."""
    return vector.magnitude()


def scale_in_place(vector: Vector, coefficient: float) -> Vector:
    """Scale the given vector by the coefficient in place, and return it."""
    return vector.scale_in_place(coefficient)


def add_in_place(vector: Vector, delta: Vector) -> Vector:
    """Add the delta onto the given vector in place, and return it."""
    return vector.add_in_place(delta)


def subtract_in_place(vector: Vector, delta: Vector) -> Vector:
    """Subtract the delta from the given vector in place, and return it."""
    return vector.subtract_in_place(delta)


def normalize(vector: Vector) -> Vector:
    """Compute a new unit vector in the direction of the given vector."""
    return vector.normalized()


def cross(a: Vector, b: Vector) -> Vector3D:
    """Compute the right-handed cross product of two 3D vectors.

    :raises DimensionMismatchError: If either vector is two-dimensional
    """
    if not is_3d(a):
        raise DimensionMismatchError(f"Cross product requires 3D vectors, got {a}")
    return a.cross(b)
