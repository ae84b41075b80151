"""Define a raster canvas onto which projected 2D line segments are stroked."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import cv2
import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.typing import NDArray

    from wireframe_utils.geometry.lines import LineSegment
    from wireframe_utils.math.vectors import Vector2D

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]
"""A color as (red, green, blue) values in [0, 255]."""

BACKGROUND_RGB: RGB = (255, 255, 255)
EDGE_RGB: RGB = (0, 0, 0)
AXIS_RGB: RGB = (220, 0, 0)

STYLE_COLORS: dict[str, RGB] = {"edge": EDGE_RGB, "axis": AXIS_RGB}
"""Colors used for each line segment style tag."""


class WireframeCanvas:
    """An RGB image of shape (H, W, 3) on which 2D line segments are drawn."""

    def __init__(self, height_px: int, width_px: int, background: RGB = BACKGROUND_RGB) -> None:
        """Initialize a blank canvas of the given size (pixels) and background color."""
        if height_px <= 0 or width_px <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {(height_px, width_px)}")

        self.background = background
        self.data: NDArray[np.uint8] = np.empty((height_px, width_px, 3), dtype=np.uint8)
        self.clear()

    @property
    def height(self) -> int:
        """Retrieve the height (in pixels) of the canvas."""
        return self.data.shape[0]

    @property
    def width(self) -> int:
        """Retrieve the width (in pixels) of the canvas."""
        return self.data.shape[1]

    def clear(self) -> None:
        """Fill the entire canvas with its background color."""
        self.data[:, :] = self.background

    def draw_segment(
        self,
        line: LineSegment[Vector2D],
        color: RGB | None = None,
        thickness: int = 1,
    ) -> bool:
        """Stroke a 2D line segment onto the canvas.

        Segments with non-finite endpoints (e.g., from a degenerate projection) are skipped.

        :param line: Line segment in pixel coordinates relative to the canvas's top-left
        :param color: Color of the stroke (defaults to None = chosen by the segment's style)
        :param thickness: Thickness (pixels) of the stroke (defaults to 1)
        :return: True if the segment was drawn, else False
        """
        if not line.is_finite():
            logger.debug(f"Skipping segment with non-finite endpoints: {line}")
            return False

        if color is None:
            color = STYLE_COLORS.get(line.style or "", EDGE_RGB)

        start_px, end_px = line.to_pixels()
        cv2.line(self.data, start_px, end_px, color=color, thickness=thickness)
        return True

    def draw_segments(self, lines: Iterable[LineSegment[Vector2D]], thickness: int = 1) -> int:
        """Stroke several 2D line segments onto the canvas, colored by their styles.

        :return: Number of segments that were drawn
        """
        return sum(self.draw_segment(line, thickness=thickness) for line in lines)

    def convert_for_visualization(self) -> NDArray[np.uint8]:
        """Convert the canvas into BGR data for display using OpenCV."""
        return cv2.cvtColor(self.data, cv2.COLOR_RGB2BGR)
