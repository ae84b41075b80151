"""Define functions to show images in OpenCV windows sized to fit the screen."""

from __future__ import annotations

from typing import Protocol

import cv2
import numpy as np
from numpy.typing import NDArray

QUIT_KEY = "q"


class Displayable(Protocol):
    """Protocol for images supporting visualization in OpenCV."""

    def convert_for_visualization(self) -> NDArray[np.uint8]:
        """Convert the Displayable into BGR data that OpenCV can show."""
        ...


def find_screen_resolution() -> tuple[int, int]:
    """Find the resolution (H, W) of the current screen."""
    import tkinter as tk  # noqa: PLC0415

    root = tk.Tk()
    h_px = root.winfo_screenheight()
    w_px = root.winfo_screenwidth()
    root.destroy()
    return (h_px, w_px)


def fit_to_screen(image_hw: tuple[int, int], screen_hw: tuple[int, int]) -> tuple[int, int]:
    """Compute the window size (H, W) that shows an image as large as possible on-screen.

    Images are only ever shrunk (never enlarged) and keep their aspect ratio.
    """
    h, w = image_hw
    scale = min(screen_hw[0] / h, screen_hw[1] / w, 1.0)
    return (max(1, int(h * scale)), max(1, int(w * scale)))


def display_in_window(image: Displayable, window_title: str, wait_for_input: bool = True) -> bool:
    """Display an image in an OpenCV window with the given title.

    :param image: Image supporting conversion into a displayable format
    :param window_title: Title used for the display window (e.g., "Cuboid Viewer")
    :param wait_for_input: Whether to block until any key is pressed (defaults to True)
    :return: True if the window remains open, False once it has been closed
    """
    display_data = image.convert_for_visualization()
    window_h, window_w = fit_to_screen(display_data.shape[:2], find_screen_resolution())

    title = f"{window_title} (press any key to exit)" if wait_for_input else window_title
    cv2.namedWindow(title, cv2.WINDOW_NORMAL)
    cv2.resizeWindow(title, window_w, window_h)
    cv2.imshow(title, display_data)

    key = cv2.waitKey(0 if wait_for_input else 1) & 0xFF
    if wait_for_input or key == ord(QUIT_KEY):
        cv2.destroyWindow(title)
        return False

    return True
