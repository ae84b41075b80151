"""Unit tests for projecting vectors onto axes and decomposing them into bases."""

from __future__ import annotations

import math

import pytest
from hypothesis import given

from wireframe_utils.geometry import Basis2D, Basis3D
from wireframe_utils.math import (
    DimensionMismatchError,
    Vector2D,
    Vector3D,
    decompose,
    reconstruct,
    scalar_projection_on_axis,
    signed_distance_on_axis,
)

from .strategies.vector_strategies import orthogonal_bases, vectors_3d


@given(vectors_3d(), orthogonal_bases())
def test_decompose_and_reconstruct(vector: Vector3D, basis: Basis3D) -> None:
    """Verify that any vector is unchanged after decomposing into and rebuilding from a basis."""
    # Arrange/Act - Express the vector in an orthogonal basis, then rebuild it
    coefficients = decompose(vector, basis)
    result = reconstruct(coefficients, basis)

    # Assert - Expect that the rebuilt vector approximately equals the original
    assert result.approx_equal(vector, rtol=1e-6, atol=1e-6)


def test_projection_on_non_unit_axis() -> None:
    """Verify the scalar projection and signed distance onto an axis of length two."""
    vector = Vector3D(3.0, 4.0, 0.0)
    axis = Vector3D(2.0, 0.0, 0.0)

    assert scalar_projection_on_axis(vector, axis) == pytest.approx(1.5)
    assert signed_distance_on_axis(vector, axis) == pytest.approx(3.0)
    assert signed_distance_on_axis(-vector, axis) == pytest.approx(-3.0)


def test_projection_on_zero_axis_is_not_finite() -> None:
    """Verify that projecting onto a zero axis propagates NaN or inf instead of raising."""
    vector = Vector2D(1.0, 2.0)
    zero_axis = Vector2D(0.0, 0.0)

    assert not math.isfinite(scalar_projection_on_axis(vector, zero_axis))
    assert not math.isfinite(signed_distance_on_axis(vector, zero_axis))


def test_decompose_2d_vector() -> None:
    """Verify that a 2D vector decomposes into a 2D basis of non-unit orthogonal axes."""
    basis = Basis2D(Vector2D(2.0, 0.0), Vector2D(0.0, -0.5))

    result = decompose(Vector2D(4.0, 1.0), basis)

    assert result == Vector2D(2.0, -2.0)


def test_reconstruct_with_skewed_basis() -> None:
    """Verify that reconstruction is a plain linear combination, even for a skewed basis."""
    basis = Basis2D(Vector2D(1.0, 0.0), Vector2D(1.0, 1.0))

    result = reconstruct(Vector2D(1.0, 2.0), basis)

    assert result == Vector2D(3.0, 2.0)


def test_decompose_with_skewed_basis_is_not_inverted() -> None:
    """Verify that decomposition does not solve a general change of basis for skewed bases."""
    basis = Basis2D(Vector2D(1.0, 0.0), Vector2D(1.0, 1.0))
    coefficients = Vector2D(1.0, 2.0)

    rebuilt = reconstruct(decompose(reconstruct(coefficients, basis), basis), basis)

    assert not rebuilt.approx_equal(reconstruct(coefficients, basis))


def test_decompose_rejects_mismatched_dimensions() -> None:
    """Verify that decomposition requires a basis of the vector's dimensionality."""
    with pytest.raises(DimensionMismatchError):
        decompose(Vector3D(1.0, 2.0, 3.0), Basis2D.identity())

    with pytest.raises(DimensionMismatchError):
        reconstruct(Vector2D(1.0, 2.0), Basis3D.identity())
