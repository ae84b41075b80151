"""Define a function to compute the rotation carrying one direction onto another."""

from __future__ import annotations

import numpy as np

from wireframe_utils.geometry.bases import Basis3D, basis_from_matrix
from wireframe_utils.math.vectors import Vector3D


def rotation_between(a: Vector3D, b: Vector3D) -> Basis3D:
    """Compute the rotation that carries the direction of `a` onto the direction of `b`.

    The rotation is returned as a basis whose rows form the rotation matrix R, using the
    row-vector convention of `rotate_basis`: unit(a) @ R = unit(b).

    Reference: https://mathworld.wolfram.com/RodriguesRotationFormula.html

    :param a: Starting direction (need not be a unit vector)
    :param b: Target direction (need not be a unit vector)
    :return: Rotation basis, or the identity if the directions are parallel or either is zero
    """
    axis = a.cross(b)
    if axis.magnitude() == 0:
        return Basis3D.identity()

    unit_a = a.normalized()
    unit_b = b.normalized()
    sin_theta = unit_a.cross(unit_b).magnitude()
    cos_theta = unit_a.dot(unit_b)
    kx, ky, kz = axis.normalized()

    k_matrix = np.array([[0.0, -kz, ky], [kz, 0.0, -kx], [-ky, kx, 0.0]])
    column_rotation = np.eye(3) + sin_theta * k_matrix + (1 - cos_theta) * (k_matrix @ k_matrix)

    return basis_from_matrix(column_rotation.T)  # Transpose into the row-vector convention
