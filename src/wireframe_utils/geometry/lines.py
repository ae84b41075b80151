"""Define a class to represent line segments between 2D or 3D points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from wireframe_utils.math.vectors import Vector2D, Vector3D, is_3d

VectorT = TypeVar("VectorT", Vector2D, Vector3D)
"""The type of vector used for a segment's endpoints."""

PixelXY = tuple[int, int]
"""Integer (x,y) pixel coordinates on a drawing surface."""


@dataclass(frozen=True)
class LineSegment(Generic[VectorT]):
    """A straight line segment between two points of the same dimensionality."""

    start: VectorT
    end: VectorT

    style: str | None = None
    """Optional display-only tag (e.g., "edge" or "axis") carried through projection."""

    def is_finite(self) -> bool:
        """Check whether both endpoints have only finite coordinates (no NaN or infinity)."""
        return all(math.isfinite(coord) for coord in (*self.start, *self.end))

    def to_pixels(self) -> tuple[PixelXY, PixelXY]:
        """Round the endpoints of a 2D segment to the nearest integer pixels.

        :return: Tuple of (start pixel, end pixel)
        :raises ValueError: If the segment is three-dimensional or has non-finite endpoints
        """
        if is_3d(self.start) or is_3d(self.end):
            raise ValueError(f"Only 2D segments can be rounded to pixels, got {self}")
        if not self.is_finite():
            raise ValueError(f"Cannot round non-finite endpoints to pixels: {self}")

        return (
            (round(self.start.x), round(self.start.y)),
            (round(self.end.x), round(self.end.y)),
        )
