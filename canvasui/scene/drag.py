"""Drag session state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from canvasui.scene.node import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DragIdle:
    """No drag session is active."""


@dataclass(frozen=True, slots=True)
class Dragging:
    """One node is tracking the pointer with a fixed grab offset."""

    node: Node
    origin_x: float
    origin_y: float


DragState = DragIdle | Dragging

DRAG_IDLE = DragIdle()


class DragController:
    """Single-pointer drag session tracking for one surface."""

    def __init__(self) -> None:
        self._node: Node | None = None

    @property
    def state(self) -> DragState:
        node = self._node
        if node is None:
            return DRAG_IDLE
        origin_x, origin_y = node.drag_origin
        return Dragging(node=node, origin_x=origin_x, origin_y=origin_y)

    @property
    def is_dragging(self) -> bool:
        return self._node is not None

    def begin(self, node: Node, x: float, y: float) -> bool:
        """Offer a drag start to ``node``; return whether a session started."""
        node.start_dragging(x, y)
        if not node.is_dragging:
            return False
        self._node = node
        logger.debug(
            "drag_begin node=%r origin=(%.1f, %.1f)", node, node.drag_origin[0], node.drag_origin[1]
        )
        return True

    def drag_to(self, x: float, y: float) -> bool:
        """Forward a pointer move to the dragged node, if any."""
        node = self._node
        if node is None:
            return False
        node.handle_dragging(x, y)
        return True

    def end(self, node: Node) -> None:
        """Stop ``node``'s drag hooks and return to idle unconditionally."""
        node.stop_dragging()
        if self._node is not None and self._node is not node:
            self._node.stop_dragging()
        if self._node is not None:
            logger.debug("drag_end node=%r", self._node)
        self._node = None

    def cancel(self) -> bool:
        """Abort the active session without a pointer-up; return whether one existed."""
        node = self._node
        if node is None:
            return False
        self._node = None
        node.stop_dragging()
        logger.debug("drag_cancelled node=%r", node)
        return True


__all__ = ["DRAG_IDLE", "DragController", "DragIdle", "DragState", "Dragging"]
