"""Define classes to represent 2D and 3D bases and convert them to and from matrices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import numpy as np

from wireframe_utils.math.matrices import matrix_multiply
from wireframe_utils.math.vectors import DimensionMismatchError, Vector2D, Vector3D, is_3d

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


@dataclass(frozen=True)
class Basis2D:
    """An ordered pair of 2D vectors used as the axes of a plane.

    No orthogonality or unit-length constraint is imposed.
    """

    x_basis: Vector2D
    y_basis: Vector2D

    def __post_init__(self) -> None:
        """Verify that both basis vectors are two-dimensional."""
        if is_3d(self.x_basis) or is_3d(self.y_basis):
            raise DimensionMismatchError(f"Basis2D expects 2D vectors, got {self}")

    @classmethod
    def identity(cls) -> Basis2D:
        """Construct the standard basis {(1,0), (0,1)}."""
        return Basis2D(Vector2D(1.0, 0.0), Vector2D(0.0, 1.0))


@dataclass(frozen=True)
class Basis3D:
    """An ordered triple of 3D vectors used as the axes of a 3D frame.

    No orthogonality or unit-length constraint is imposed.
    """

    x_basis: Vector3D
    y_basis: Vector3D
    z_basis: Vector3D

    def __post_init__(self) -> None:
        """Verify that all three basis vectors are three-dimensional."""
        if not (is_3d(self.x_basis) and is_3d(self.y_basis) and is_3d(self.z_basis)):
            raise DimensionMismatchError(f"Basis3D expects 3D vectors, got {self}")

    @classmethod
    def identity(cls) -> Basis3D:
        """Construct the standard basis {(1,0,0), (0,1,0), (0,0,1)}."""
        return Basis3D(
            Vector3D(1.0, 0.0, 0.0),
            Vector3D(0.0, 1.0, 0.0),
            Vector3D(0.0, 0.0, 1.0),
        )

    @classmethod
    def from_sequence(cls, rows: Sequence[Sequence[float]]) -> Basis3D:
        """Construct a Basis3D from a sequence of three (x,y,z) rows."""
        if len(rows) != 3:
            raise ValueError(f"Basis3D expects 3 basis vectors, got {len(rows)}")
        return Basis3D(*(Vector3D.from_sequence(row) for row in rows))

    def approx_equal(self, other: Basis3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Basis3D is approximately equal to this one."""
        return bool(
            np.allclose(matrix_from_basis(self), matrix_from_basis(other), rtol=rtol, atol=atol),
        )


Basis = Union[Basis2D, Basis3D]
"""A basis of either dimensionality."""


def basis_from_matrix(matrix: NDArray[np.float64] | Sequence[Sequence[float]]) -> Basis3D:
    """Construct a 3D basis whose i-th vector is the i-th row of a 3x3 matrix."""
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise ValueError(f"Basis3D expects a 3x3 matrix, got {matrix.shape}")

    return Basis3D(
        Vector3D.from_array(matrix[0]),
        Vector3D.from_array(matrix[1]),
        Vector3D.from_array(matrix[2]),
    )


def matrix_from_basis(basis: Basis3D) -> NDArray[np.float64]:
    """Convert a 3D basis into a 3x3 matrix whose rows are the basis vectors."""
    return np.array(
        [basis.x_basis.to_array(), basis.y_basis.to_array(), basis.z_basis.to_array()],
        dtype=np.float64,
    )


def rotate_basis(basis: Basis3D, rotation: Basis3D) -> Basis3D:
    """Compose a basis with a rotation, computed as the matrix product (basis @ rotation).

    This is how a camera frame accumulates incremental rotations frame over frame.

    :param basis: Current basis (e.g., the orientation of a camera)
    :param rotation: Rotation delta, written as a basis whose rows form the rotation matrix
    :return: New basis after applying the rotation
    """
    return basis_from_matrix(matrix_multiply(matrix_from_basis(basis), matrix_from_basis(rotation)))
