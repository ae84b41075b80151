"""Define functions to express vectors in (and rebuild vectors from) arbitrary bases."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wireframe_utils.math.vectors import (
    DimensionMismatchError,
    Vector,
    Vector2D,
    Vector3D,
    is_3d,
    safe_divide,
)

if TYPE_CHECKING:
    from wireframe_utils.geometry.bases import Basis


def scalar_projection_on_axis(vector: Vector, axis: Vector) -> float:
    """Compute the coefficient of the vector's orthogonal projection along an axis.

    The axis need not be a unit vector. A zero axis gives inf or NaN.

    :param vector: Vector being projected
    :param axis: Axis onto which the vector is projected
    :return: Scalar k such that k * axis is the projection of the vector onto the axis
    """
    return safe_divide(vector.dot(axis), axis.dot(axis))


def signed_distance_on_axis(vector: Vector, axis: Vector) -> float:
    """Compute the signed length of the vector's projection onto an axis.

    Unlike `scalar_projection_on_axis`, the result does not depend on the axis's length.
    """
    return safe_divide(vector.dot(axis), axis.magnitude())


def _check_dimensions(vector: Vector, basis: Basis) -> None:
    """Verify that the vector and the basis have the same dimensionality."""
    if is_3d(vector) != is_3d(basis.x_basis):
        raise DimensionMismatchError(
            f"Vector {vector} and basis {basis} have different dimensionality",
        )


def decompose(vector: Vector, basis: Basis) -> Vector:
    """Compute the coordinates of a vector relative to the given basis.

    Each coordinate is the scalar projection of the vector onto one basis vector, which
    equals the true change of basis only when the basis vectors are mutually orthogonal.
    For a skewed basis the result is not a valid set of coordinates.

    :param vector: 2D or 3D vector to be decomposed
    :param basis: Basis of the same dimensionality as the vector
    :return: New vector of per-axis coordinates (x, y[, z])
    :raises DimensionMismatchError: If the vector and basis differ in dimensionality
    """
    _check_dimensions(vector, basis)

    x = scalar_projection_on_axis(vector, basis.x_basis)
    y = scalar_projection_on_axis(vector, basis.y_basis)
    if isinstance(vector, Vector3D):
        z = scalar_projection_on_axis(vector, basis.z_basis)
        return Vector3D(x, y, z)
    return Vector2D(x, y)


def reconstruct(coefficients: Vector, basis: Basis) -> Vector:
    """Rebuild a vector as a linear combination of basis vectors (the inverse of decompose).

    Valid for any basis, orthogonal or not.

    :param coefficients: Coordinates (x, y[, z]) of the vector relative to the basis
    :param basis: Basis of the same dimensionality as the coefficients
    :return: New vector expressed in the frame the basis vectors are written in
    """
    _check_dimensions(coefficients, basis)

    result = basis.x_basis * coefficients.x
    result.add_in_place(basis.y_basis * coefficients.y)
    if isinstance(coefficients, Vector3D):
        result.add_in_place(basis.z_basis * coefficients.z)
    return result
