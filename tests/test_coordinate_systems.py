"""Unit tests for coordinate systems, projection planes, and screen projection."""

from __future__ import annotations

import math

import numpy as np
import pytest
from hypothesis import given

from wireframe_utils.geometry import (
    Basis3D,
    CoordinateSystem,
    Cuboid,
    LineSegment,
    project_point,
    project_segment,
    project_segments,
    projection_plane_of,
    screen_point_to_world,
)
from wireframe_utils.math import ZERO, Vector2D, Vector3D

from .strategies.vector_strategies import orthonormal_bases, vectors_2d, vectors_3d


@pytest.fixture
def isometric_system() -> CoordinateSystem:
    """Create a coordinate system viewing the absolute frame from an isometric angle."""
    return CoordinateSystem(
        origin=Vector3D(200.0, 150.0, 0.0),
        basis=Basis3D(
            Vector3D(1 / math.sqrt(2), -1 / math.sqrt(6), -1 / math.sqrt(3)),
            Vector3D(-1 / math.sqrt(2), -1 / math.sqrt(6), -1 / math.sqrt(3)),
            Vector3D(0.0, math.sqrt(2) / math.sqrt(3), -1 / math.sqrt(3)),
        ),
    )


@pytest.fixture
def axis_aligned_system() -> CoordinateSystem:
    """Create a coordinate system aligned with the absolute frame, offset by (200, 150, 0)."""
    return CoordinateSystem(origin=Vector3D(200.0, 150.0, 0.0), basis=Basis3D.identity())


def test_isometric_cuboid_projects_to_finite_segments(isometric_system: CoordinateSystem) -> None:
    """Verify that the isometric view of a cuboid projects into 12 finite 2D segments."""
    # Arrange - Build the cuboid's 3D edges
    edges = Cuboid(50.0, 100.0, 100.0).edges()

    # Act - Project every edge onto the coordinate system's screen plane
    projected = project_segments(edges, isometric_system)

    # Assert - Expect 12 two-dimensional segments with finite endpoints
    assert len(projected) == 12
    for line in projected:
        assert isinstance(line.start, Vector2D)
        assert isinstance(line.end, Vector2D)
        assert np.all(np.isfinite([*line.start, *line.end]))


def test_axis_aligned_projection(axis_aligned_system: CoordinateSystem) -> None:
    """Verify that an axis-aligned system shifts points by its origin and drops z."""
    # Arrange/Act - Derive the projection plane of the axis-aligned system
    plane = projection_plane_of(axis_aligned_system)

    # Assert - Expect the absolute origin to land at the system's origin on-screen
    assert plane.origin == Vector3D(-200.0, -150.0, -0.0)
    assert project_point(ZERO, plane) == Vector2D(200.0, 150.0)
    assert project_point(Vector3D(50.0, -100.0, -100.0), plane) == Vector2D(250.0, 50.0)


def test_screen_origin_maps_to_plane_origin(isometric_system: CoordinateSystem) -> None:
    """Verify that the screen's (0,0) pixel maps back onto the projection plane's origin."""
    # Arrange/Act - Map the screen origin back into 3D
    result = screen_point_to_world(isometric_system, Vector2D(0.0, 0.0))

    # Assert - Expect exactly the projection plane's origin
    assert result == projection_plane_of(isometric_system).origin


@given(orthonormal_bases(), vectors_3d(), vectors_2d())
def test_screen_point_to_world_and_back(
    basis: Basis3D,
    origin: Vector3D,
    screen_xy: Vector2D,
) -> None:
    """Verify that mapping a pixel into 3D and projecting it back returns the same pixel."""
    # Arrange - Given an orthonormal coordinate system, derive its projection plane
    coordinate_system = CoordinateSystem(origin, basis)
    plane = projection_plane_of(coordinate_system)

    # Act - Map the pixel onto the plane in 3D, then project it back onto the screen
    world_point = screen_point_to_world(coordinate_system, screen_xy)
    result = project_point(world_point, plane)

    # Assert - Expect the original pixel coordinates
    assert result.approx_equal(screen_xy, rtol=1e-6, atol=1e-6)


def test_project_segment_keeps_style(axis_aligned_system: CoordinateSystem) -> None:
    """Verify that projecting a line segment carries its style tag through unchanged."""
    plane = projection_plane_of(axis_aligned_system)
    line = LineSegment(Vector3D(0.0, 0.0, 0.0), Vector3D(10.0, 0.0, 0.0), style="axis")

    result = project_segment(line, plane)

    assert result.style == "axis"
    assert result.start == Vector2D(200.0, 150.0)
    assert result.end == Vector2D(210.0, 150.0)


def test_projection_follows_rotation(axis_aligned_system: CoordinateSystem) -> None:
    """Verify that the projection plane is re-derived after the caller rotates its system."""
    # Arrange - Project a point, then rotate the system a quarter turn about z
    point = Vector3D(10.0, 0.0, 0.0)
    before = project_point(point, projection_plane_of(axis_aligned_system))
    quarter_turn = Basis3D.from_sequence([[0, 1, 0], [-1, 0, 0], [0, 0, 1]])

    # Act - Rotate the system in place and project the point again
    axis_aligned_system.rotate_in_place(quarter_turn)
    after = project_point(point, projection_plane_of(axis_aligned_system))

    # Assert - Expect the point to move on-screen
    assert not after.approx_equal(before)


def test_rotated_by_leaves_original_unchanged(isometric_system: CoordinateSystem) -> None:
    """Verify that rotated_by() creates a new coordinate system without mutating the original."""
    original_basis = isometric_system.basis
    quarter_turn = Basis3D.from_sequence([[0, 1, 0], [-1, 0, 0], [0, 0, 1]])

    rotated = isometric_system.rotated_by(quarter_turn)

    assert isometric_system.basis is original_basis
    assert rotated.origin == isometric_system.origin
    assert rotated.origin is not isometric_system.origin
    assert not rotated.basis.approx_equal(original_basis)


def test_projection_plane_normal(axis_aligned_system: CoordinateSystem) -> None:
    """Verify that the projection plane of an axis-aligned system faces along +z."""
    plane = projection_plane_of(axis_aligned_system)

    assert plane.normal == Vector3D(0.0, 0.0, 1.0)
