"""Define coordinate systems and the projection of 3D points onto a screen plane.

A coordinate system describes a frame (e.g., a camera) relative to the absolute frame,
in which x points right, y points down, and z points out of the screen. The projection
plane derived from a coordinate system is the 2D drawing surface expressed in that
frame's terms; projecting a point onto it gives the point's 2D screen coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wireframe_utils.geometry.bases import Basis3D, rotate_basis
from wireframe_utils.geometry.lines import LineSegment
from wireframe_utils.math.decomposition import decompose, signed_distance_on_axis
from wireframe_utils.math.vectors import Vector2D, Vector3D

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass
class CoordinateSystem:
    """An origin and a basis describing a frame relative to the absolute frame."""

    origin: Vector3D
    """Position of the frame's origin."""

    basis: Basis3D
    """Direction vectors of the frame's axes."""

    def rotated_by(self, rotation: Basis3D) -> CoordinateSystem:
        """Construct a new coordinate system whose basis is rotated by the given rotation."""
        return CoordinateSystem(self.origin.copy(), rotate_basis(self.basis, rotation))

    def rotate_in_place(self, rotation: Basis3D) -> None:
        """Rotate this coordinate system's basis by the given rotation."""
        self.basis = rotate_basis(self.basis, rotation)


@dataclass(frozen=True)
class ProjectionPlane:
    """The 2D drawing plane, expressed as an origin and two axes in 3D coordinates."""

    origin: Vector3D
    x_basis: Vector3D
    y_basis: Vector3D

    @property
    def normal(self) -> Vector3D:
        """Compute the (unnormalized) normal vector of the plane."""
        return self.x_basis.cross(self.y_basis)


def projection_plane_of(coordinate_system: CoordinateSystem) -> ProjectionPlane:
    """Derive the projection plane implied by a coordinate system.

    The plane's origin is where the absolute origin lands in the coordinate system, and its
    axes are the absolute x- and y-axes expressed in the coordinate system's basis. Derive
    the plane again whenever the coordinate system changes.
    """
    basis = coordinate_system.basis
    return ProjectionPlane(
        origin=decompose(-coordinate_system.origin, basis),
        x_basis=decompose(Vector3D(1.0, 0.0, 0.0), basis),
        y_basis=decompose(Vector3D(0.0, 1.0, 0.0), basis),
    )


def project_point(point: Vector3D, plane: ProjectionPlane) -> Vector2D:
    """Map a 3D point onto the 2D coordinates of the given projection plane."""
    offset = point - plane.origin
    return Vector2D(
        signed_distance_on_axis(offset, plane.x_basis),
        signed_distance_on_axis(offset, plane.y_basis),
    )


def project_segment(line: LineSegment[Vector3D], plane: ProjectionPlane) -> LineSegment[Vector2D]:
    """Project both endpoints of a 3D line segment onto the given projection plane."""
    return LineSegment(
        start=project_point(line.start, plane),
        end=project_point(line.end, plane),
        style=line.style,
    )


def project_segments(
    lines: Iterable[LineSegment[Vector3D]],
    coordinate_system: CoordinateSystem,
) -> list[LineSegment[Vector2D]]:
    """Project 3D line segments onto the screen plane of a coordinate system.

    :param lines: 3D line segments to be projected (e.g., the edges of a shape)
    :param coordinate_system: Current coordinate system of the viewer
    :return: List of projected 2D line segments, in the same order
    """
    plane = projection_plane_of(coordinate_system)
    return [project_segment(line, plane) for line in lines]


def screen_point_to_world(coordinate_system: CoordinateSystem, screen_xy: Vector2D) -> Vector3D:
    """Map a 2D screen offset back onto the 3D point on the projection plane.

    :param coordinate_system: Coordinate system defining the projection plane
    :param screen_xy: Offset (x,y) of a pixel from the drawing surface's origin
    :return: 3D point on the projection plane corresponding to the pixel
    """
    plane = projection_plane_of(coordinate_system)
    point = plane.x_basis.normalized() * screen_xy.x
    point.add_in_place(plane.y_basis.normalized() * screen_xy.y)
    return point.add_in_place(plane.origin)
