"""Project a wireframe cuboid onto the screen and optionally rotate it with the mouse.

To run this script, use the commands:

    uv venv --clear && uv sync
    uv run scripts/cuboid_viewer.py --scene scenes/default_scene.yaml --mode interactive

The interactive and static modes need a GUI build of OpenCV (`opencv-python`).
"""

from __future__ import annotations

from pathlib import Path

import click
import cv2
from rich.table import Table

from wireframe_utils.geometry import LineSegment, project_segments
from wireframe_utils.interaction import ArcballController
from wireframe_utils.io import configure_logging, console
from wireframe_utils.io.scene_schema import load_scene
from wireframe_utils.math import Vector2D
from wireframe_utils.visualization import WireframeCanvas, display_in_window

DEFAULT_SCENE_PATH = Path(__file__).parent.parent / "scenes/default_scene.yaml"
WINDOW_TITLE = "Cuboid Viewer (drag to rotate, press 'q' to exit)"


def print_segments(lines: list[LineSegment[Vector2D]]) -> None:
    """Print a table of projected 2D segments, rounded to integer pixels.

    Segments with non-finite endpoints (e.g., from a degenerate basis) are printed unrounded.
    """
    table = Table(title="Projected Segments")
    table.add_column("#", justify="right")
    table.add_column("Style")
    table.add_column("Start (px)")
    table.add_column("End (px)")

    for i, line in enumerate(lines):
        start, end = line.to_pixels() if line.is_finite() else (line.start, line.end)
        table.add_row(str(i), line.style or "-", str(start), str(end))

    console.print(table)


@click.command()
@click.option(
    "--scene",
    "scene_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=DEFAULT_SCENE_PATH,
    help="YAML file describing the camera, cuboid, and canvas",
)
@click.option("--axis/--no-axis", default=None, help="Override the scene's axis indicator")
@click.option(
    "--mode",
    type=click.Choice(["print", "static", "interactive"]),
    default="print",
    help="Only print the segments, or also show them in a (static/interactive) window",
)
@click.option("--verbose", is_flag=True, help="Log debug messages")
def main(scene_path: Path, axis: bool | None, mode: str, verbose: bool) -> None:
    """Project the scene's cuboid onto its canvas and display the result."""
    configure_logging(verbose)

    scene = load_scene(scene_path)
    include_axis = scene.axis_indicator if axis is None else axis
    edges = scene.cuboid.edges(include_axis_indicator=include_axis)

    projected = project_segments(edges, scene.coordinate_system)
    print_segments(projected)

    if mode == "print":
        return

    canvas = WireframeCanvas(scene.canvas_height_px, scene.canvas_width_px)
    canvas.draw_segments(projected)

    if mode == "static":
        display_in_window(canvas, "Cuboid Viewer", wait_for_input=True)
        return

    arcball = ArcballController(radius_px=min(canvas.height, canvas.width) / 2)

    def on_mouse(event: int, x: int, y: int, _flags: int, _param: object) -> None:
        """Forward pointer events to the arcball controller."""
        pixel = Vector2D(float(x), float(y))
        if event == cv2.EVENT_LBUTTONDOWN:
            arcball.press(pixel)
        elif event == cv2.EVENT_MOUSEMOVE:
            arcball.drag(scene.coordinate_system, pixel)
        elif event == cv2.EVENT_LBUTTONUP:
            arcball.release()

    cv2.namedWindow(WINDOW_TITLE)
    cv2.setMouseCallback(WINDOW_TITLE, on_mouse)

    while True:
        canvas.clear()
        canvas.draw_segments(project_segments(edges, scene.coordinate_system))
        cv2.imshow(WINDOW_TITLE, canvas.convert_for_visualization())

        if cv2.waitKey(16) & 0xFF == ord("q"):
            break

    cv2.destroyAllWindows()
    console.print("[green]Viewer closed.[/]")


if __name__ == "__main__":
    main()
