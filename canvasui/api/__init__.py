"""Public canvasui API contracts."""

from canvasui.api.drawing import DrawingSurface, TransformScopeMixin
from canvasui.api.errors import (
    AttachError,
    CyclicAttachError,
    InvalidGeometryError,
    NodeAlreadyAttachedError,
    SceneGraphError,
)
from canvasui.api.geometry import Point, Rect, validate_size
from canvasui.api.input_events import KeyEvent, PointerEvent, TouchPoint
from canvasui.api.logging import LoggingConfig
from canvasui.api.render_snapshot import (
    IDENTITY_AFFINE,
    Affine2D,
    RenderCommand,
    RenderSnapshot,
    affine_rotation,
    affine_translation,
    create_render_snapshot,
)

__all__ = [
    "Affine2D",
    "AttachError",
    "CyclicAttachError",
    "DrawingSurface",
    "IDENTITY_AFFINE",
    "InvalidGeometryError",
    "KeyEvent",
    "LoggingConfig",
    "NodeAlreadyAttachedError",
    "Point",
    "PointerEvent",
    "Rect",
    "RenderCommand",
    "RenderSnapshot",
    "SceneGraphError",
    "TouchPoint",
    "TransformScopeMixin",
    "affine_rotation",
    "affine_translation",
    "create_render_snapshot",
    "validate_size",
]
