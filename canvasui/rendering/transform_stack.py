"""Save/restore transform state shared by drawing backends."""

from __future__ import annotations

import logging

from canvasui.api.drawing import TransformScopeMixin
from canvasui.api.render_snapshot import (
    IDENTITY_AFFINE,
    Affine2D,
    affine_rotation,
    affine_translation,
)

logger = logging.getLogger(__name__)


class TransformStack(TransformScopeMixin):
    """Canvas-style current transform with a save/restore stack."""

    def __init__(self, width: int, height: int) -> None:
        self._width = max(1, int(width))
        self._height = max(1, int(height))
        self._transform = IDENTITY_AFFINE
        self._saved: list[Affine2D] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def transform(self) -> Affine2D:
        return self._transform

    @property
    def depth(self) -> int:
        return len(self._saved)

    def save(self) -> None:
        self._saved.append(self._transform)

    def restore(self) -> None:
        if not self._saved:
            logger.debug("transform_restore_without_save")
            return
        self._transform = self._saved.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._transform = self._transform.then(affine_translation(dx, dy))

    def rotate(self, angle: float) -> None:
        if angle == 0.0:
            return
        self._transform = self._transform.then(affine_rotation(angle))

    def reset_transform(self) -> None:
        self._transform = IDENTITY_AFFINE
        self._saved.clear()

    def resize_target(self, width: int, height: int) -> None:
        self._width = max(1, int(width))
        self._height = max(1, int(height))


__all__ = ["TransformStack"]
