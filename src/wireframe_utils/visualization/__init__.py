"""Import classes and functions for visualization."""

from .display_images import Displayable as Displayable
from .display_images import display_in_window as display_in_window
from .wireframe_canvas import WireframeCanvas as WireframeCanvas
