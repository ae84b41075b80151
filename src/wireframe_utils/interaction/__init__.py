"""Import classes that turn pointer input into changes of a viewer's orientation."""

from .arcball import ArcballController as ArcballController
