"""Define a class to represent an axis-aligned cuboid as a wireframe of line segments."""

from __future__ import annotations

from dataclasses import dataclass

from wireframe_utils.geometry.lines import LineSegment
from wireframe_utils.math.vectors import Vector3D

EDGE_STYLE = "edge"
AXIS_STYLE = "axis"

CUBOID_EDGE_INDICES = (
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),
    (0, 4),
    (1, 5),
    (2, 6),
    (3, 7),
    (4, 5),
    (5, 6),
    (6, 7),
    (7, 4),
)
"""Pairs of corner indices forming the cuboid's 12 edges (bottom face, pillars, top face)."""


@dataclass(frozen=True)
class Cuboid:
    """An axis-aligned cuboid centered at the origin, defined by its half-extents."""

    half_x: float
    half_y: float
    half_z: float

    @property
    def corners(self) -> list[Vector3D]:
        """Compute the cuboid's 8 corner vertices (the face z = -half_z first)."""
        a, b, c = self.half_x, self.half_y, self.half_z
        return [
            Vector3D(-a, -b, -c),
            Vector3D(a, -b, -c),
            Vector3D(a, b, -c),
            Vector3D(-a, b, -c),
            Vector3D(-a, -b, c),
            Vector3D(a, -b, c),
            Vector3D(a, b, c),
            Vector3D(-a, b, c),
        ]

    def edges(self, include_axis_indicator: bool = False) -> list[LineSegment[Vector3D]]:
        """Enumerate the cuboid's edges as 3D line segments.

        :param include_axis_indicator: Whether to append a segment from the origin to
            (half_x, 0, 0) marking the cuboid's x-axis (defaults to False)
        :return: List of the 12 edges, followed by the optional axis indicator
        """
        corners = self.corners
        lines = [
            LineSegment(corners[i], corners[j], style=EDGE_STYLE) for i, j in CUBOID_EDGE_INDICES
        ]

        if include_axis_indicator:
            axis_end = Vector3D(self.half_x, 0.0, 0.0)
            lines.append(LineSegment(Vector3D.zero(), axis_end, style=AXIS_STYLE))

        return lines
