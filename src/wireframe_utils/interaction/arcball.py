"""Define an arcball controller that rotates a coordinate system as the pointer drags."""

from __future__ import annotations

import logging

import numpy as np

from wireframe_utils.geometry.coordinate_systems import (
    CoordinateSystem,
    project_point,
    projection_plane_of,
)
from wireframe_utils.geometry.rotations import rotation_between
from wireframe_utils.math.vectors import ZERO, Vector2D, Vector3D

logger = logging.getLogger(__name__)


class ArcballController:
    """Rotate a coordinate system by dragging points on a virtual sphere around its origin.

    Each pointer position, taken relative to the absolute origin's on-screen position, is
    lifted out of the screen onto a sphere in screen space. A drag rotates the coordinate
    system by the rotation carrying the previously lifted point onto the newly lifted one.

    Rotations compose on the right of the basis (see `rotate_basis`), so they act directly
    on screen-space coordinates: the point under the pointer stays under the pointer.
    """

    def __init__(self, radius_px: float) -> None:
        """Initialize the controller with the radius (pixels) of the virtual sphere."""
        if radius_px <= 0:
            raise ValueError(f"Arcball radius must be positive, got {radius_px}")

        self.radius_px = radius_px
        self._last_pixel: Vector2D | None = None

    @property
    def dragging(self) -> bool:
        """Indicate whether a drag is currently in progress."""
        return self._last_pixel is not None

    def press(self, pixel_xy: Vector2D) -> None:
        """Begin a drag at the given pointer position."""
        self._last_pixel = pixel_xy.copy()

    def release(self) -> None:
        """End the current drag, if any."""
        self._last_pixel = None

    def drag(self, coordinate_system: CoordinateSystem, pixel_xy: Vector2D) -> bool:
        """Rotate the coordinate system (in place) to follow the pointer to a new position.

        :param coordinate_system: Caller-owned coordinate system to be rotated
        :param pixel_xy: Current pointer position relative to the drawing surface's origin
        :return: True if the coordinate system was rotated, else False
        """
        if self._last_pixel is None or pixel_xy == self._last_pixel:
            return False

        start = self.lift_onto_sphere(coordinate_system, self._last_pixel)
        end = self.lift_onto_sphere(coordinate_system, pixel_xy)
        self._last_pixel = pixel_xy.copy()

        coordinate_system.rotate_in_place(rotation_between(start, end))
        logger.debug(f"Arcball rotated from {start} to {end}")
        return True

    def lift_onto_sphere(self, coordinate_system: CoordinateSystem, pixel_xy: Vector2D) -> Vector3D:
        """Map a pointer position onto the virtual sphere of the arcball.

        Positions outside the sphere's silhouette stay in the screen plane (zero depth).

        :param coordinate_system: Coordinate system defining the projection plane
        :param pixel_xy: Pointer position relative to the drawing surface's origin
        :return: Screen-space point (x, y, depth) on the sphere, relative to its center
        """
        center_px = project_point(ZERO, projection_plane_of(coordinate_system))
        offset = pixel_xy - center_px

        height_sq = self.radius_px**2 - offset.dot(offset)
        height = float(np.sqrt(height_sq)) if height_sq > 0 else 0.0
        return Vector3D(offset.x, offset.y, height)
