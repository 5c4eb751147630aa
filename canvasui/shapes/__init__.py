"""Shape variants built on the scene-graph ``Node``."""

from canvasui.shapes.basic import Box, Circle, CircleBox, Frame, Line, Pen, Triangle
from canvasui.shapes.button import Button
from canvasui.shapes.slider import Slider
from canvasui.shapes.text_box import TextBox

__all__ = [
    "Box",
    "Button",
    "Circle",
    "CircleBox",
    "Frame",
    "Line",
    "Pen",
    "Slider",
    "TextBox",
    "Triangle",
]
