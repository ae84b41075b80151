"""Vector algebra and screen projection utilities for rendering 3D wireframes in 2D."""
