"""Unit tests for stroking projected line segments onto a raster canvas."""

from __future__ import annotations

import math

import numpy as np
import pytest

from wireframe_utils.geometry import (
    Basis3D,
    CoordinateSystem,
    Cuboid,
    LineSegment,
    project_segments,
)
from wireframe_utils.math import Vector2D, Vector3D
from wireframe_utils.visualization import WireframeCanvas
from wireframe_utils.visualization.display_images import fit_to_screen
from wireframe_utils.visualization.wireframe_canvas import AXIS_RGB, BACKGROUND_RGB, EDGE_RGB


def test_draw_horizontal_segment() -> None:
    """Verify that a horizontal segment colors the pixels along its row."""
    # Arrange - Create a blank canvas and a horizontal segment with fractional endpoints
    canvas = WireframeCanvas(height_px=20, width_px=30)
    line = LineSegment(Vector2D(2.4, 10.6), Vector2D(20.2, 10.6), style="edge")

    # Act - Draw the segment
    drawn = canvas.draw_segment(line)

    # Assert - Expect the rounded row (y = 11) to be colored between the rounded endpoints
    assert drawn
    assert tuple(canvas.data[11, 10]) == EDGE_RGB
    assert tuple(canvas.data[11, 2]) == EDGE_RGB
    assert tuple(canvas.data[11, 25]) == BACKGROUND_RGB
    assert tuple(canvas.data[0, 0]) == BACKGROUND_RGB


def test_non_finite_segment_is_skipped() -> None:
    """Verify that a segment with NaN endpoints is skipped instead of crashing."""
    canvas = WireframeCanvas(height_px=10, width_px=10)
    line = LineSegment(Vector2D(math.nan, 1.0), Vector2D(5.0, 5.0))

    assert not canvas.draw_segment(line)
    assert np.all(canvas.data == 255)


def test_style_colors_and_bgr_conversion() -> None:
    """Verify that axis segments use the axis color and that display data is BGR."""
    canvas = WireframeCanvas(height_px=10, width_px=10)
    canvas.draw_segment(LineSegment(Vector2D(0.0, 5.0), Vector2D(9.0, 5.0), style="axis"))

    bgr = canvas.convert_for_visualization()

    assert tuple(canvas.data[5, 5]) == AXIS_RGB
    assert tuple(bgr[5, 5]) == AXIS_RGB[::-1]

    canvas.clear()
    assert np.all(canvas.data == 255)


def test_draw_projected_cuboid() -> None:
    """Verify that every projected edge of an on-screen cuboid is drawn."""
    # Arrange - Place a cuboid in the middle of a 400 x 300 canvas
    coordinate_system = CoordinateSystem(Vector3D(200.0, 150.0, 0.0), Basis3D.identity())
    edges = Cuboid(50.0, 100.0, 100.0).edges(include_axis_indicator=True)
    canvas = WireframeCanvas(height_px=300, width_px=400)

    # Act - Project and draw the edges
    drawn = canvas.draw_segments(project_segments(edges, coordinate_system))

    # Assert - Expect all 13 segments drawn, including the cuboid's outline at x = 150
    assert drawn == 13
    assert tuple(canvas.data[150, 150]) == EDGE_RGB


def test_3d_segment_cannot_be_rounded_to_pixels() -> None:
    """Verify that only 2D segments can be converted into pixel coordinates."""
    line = LineSegment(Vector3D(0.0, 0.0, 0.0), Vector3D(1.0, 1.0, 1.0))

    with pytest.raises(ValueError, match="2D"):
        line.to_pixels()


def test_non_finite_segment_cannot_be_rounded_to_pixels() -> None:
    """Verify that segments with NaN or infinite endpoints refuse conversion into pixels."""
    finite = LineSegment(Vector2D(0.4, 1.6), Vector2D(2.5, 3.0))
    degenerate = LineSegment(Vector2D(math.nan, 1.0), Vector2D(math.inf, 2.0))

    assert finite.is_finite()
    assert not degenerate.is_finite()

    with pytest.raises(ValueError, match="non-finite"):
        degenerate.to_pixels()


def test_invalid_canvas_size_raises() -> None:
    """Verify that a canvas requires positive dimensions."""
    with pytest.raises(ValueError, match="positive"):
        WireframeCanvas(height_px=0, width_px=10)


@pytest.mark.parametrize(
    ("image_hw", "screen_hw", "expected_hw"),
    [
        ((300, 400), (1080, 1920), (300, 400)),
        ((2000, 1000), (1000, 1000), (1000, 500)),
        ((500, 4000), (1000, 2000), (250, 2000)),
    ],
)
def test_fit_to_screen(
    image_hw: tuple[int, int],
    screen_hw: tuple[int, int],
    expected_hw: tuple[int, int],
) -> None:
    """Verify that windows shrink (keeping their aspect ratio) but never grow to fit the screen."""
    assert fit_to_screen(image_hw, screen_hw) == expected_hw
