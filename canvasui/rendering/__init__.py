"""Drawing-surface implementations: recording, software raster and helpers."""

from canvasui.rendering.colors import RGBA, darken_color, parse_color, resolve_color
from canvasui.rendering.raster_surface import RasterSurface
from canvasui.rendering.recording_surface import RecordingSurface
from canvasui.rendering.transform_stack import TransformStack

__all__ = [
    "RGBA",
    "RasterSurface",
    "RecordingSurface",
    "TransformStack",
    "darken_color",
    "parse_color",
    "resolve_color",
]
