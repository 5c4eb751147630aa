"""Top-level node ownership, input dispatch and the per-frame render pass."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from canvasui.api.drawing import DrawingSurface
from canvasui.api.errors import NodeAlreadyAttachedError
from canvasui.api.input_events import (
    CLICK,
    POINTER_CANCEL_TYPES,
    POINTER_DOWN_TYPES,
    POINTER_MOVE_TYPES,
    POINTER_UP_TYPES,
    RIGHT_CLICK,
    KeyEvent,
    PointerEvent,
)
from canvasui.scene.drag import DragController, DragState
from canvasui.scene.hit_test import hit_test
from canvasui.scene.node import Node
from canvasui.scene.routing import KeyboardFocus, MouseEvent

logger = logging.getLogger(__name__)


class Surface:
    """Owns the ordered top-level node list and routes input into it.

    Insertion order is paint order (back to front). Adding or removing
    top-level nodes while a dispatch or render pass is running is deferred
    until the pass completes.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._drag = DragController()
        self._drag_candidate: Node | None = None
        self._released: Node | None = None
        self._pass_depth = 0
        self._pending: list[tuple[str, Node]] = []
        self._frame_index = 0
        self.focus = KeyboardFocus()

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def drag_state(self) -> DragState:
        return self._drag.state

    @property
    def drag_candidate(self) -> Node | None:
        return self._drag_candidate

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def add_node(self, node: Node) -> None:
        """Append a top-level node in front of all existing ones."""
        if node.is_attached and not self._removal_pending(node):
            raise NodeAlreadyAttachedError(f"{node!r} must be detached before adding to a surface")
        node._bind_surface(self)
        if self._pass_depth:
            self._pending.append(("add", node))
            logger.debug("surface_add_deferred node=%r", node)
            return
        self._nodes.append(node)

    def remove_node(self, node: Node) -> None:
        """Remove a top-level node and fire its ``unmounting`` hook."""
        if node.surface is not self:
            return
        if self._pass_depth:
            self._pending.append(("remove", node))
            logger.debug("surface_remove_deferred node=%r", node)
            return
        self._remove_now(node)

    def find_node_at(self, x: float, y: float) -> Node | None:
        return hit_test(self._nodes, x, y)

    def dispatch(self, event_type: str, event: PointerEvent) -> Node | None:
        """Route one raw pointer event; return the node it was routed to."""
        event.prevent_default()
        x, y = event.surface_position()
        with self._dispatch_pass():
            if event_type in POINTER_DOWN_TYPES:
                return self._on_pointer_down(x, y)
            if event_type in POINTER_MOVE_TYPES:
                candidate = self._drag_candidate
                if candidate is not None:
                    self._drag.drag_to(x, y)
                return candidate
            if event_type in POINTER_UP_TYPES:
                candidate = self._drag_candidate
                self._released = candidate
                if candidate is not None:
                    self._drag.end(candidate)
                    self._drag_candidate = None
                return candidate
            if event_type in POINTER_CANCEL_TYPES:
                candidate = self._drag_candidate
                self.cancel_drag()
                return candidate
            if event_type in (CLICK, RIGHT_CLICK):
                target = hit_test(self._nodes, x, y)
                released = self._released
                self._released = None
                if target is not None:
                    target.handle_mouse_event(
                        event_type,
                        MouseEvent(x=x, y=y, raw=event, focus=self.focus, released=released),
                    )
                return target
        logger.debug("dispatch_ignored event_type=%s", event_type)
        return None

    def dispatch_key(self, event: KeyEvent) -> bool:
        """Route a key/char event to the focused node."""
        with self._dispatch_pass():
            return self.focus.dispatch(event)

    def cancel_drag(self) -> bool:
        """Clear the drag candidate and any active session."""
        candidate = self._drag_candidate
        self._drag_candidate = None
        self._released = None
        if candidate is None:
            return False
        self._drag.end(candidate)
        logger.debug("drag_candidate_cancelled node=%r", candidate)
        return True

    def render_frame(self, ctx: DrawingSurface) -> None:
        """Clear ``ctx`` and render every top-level node back to front."""
        with self._dispatch_pass():
            ctx.clear()
            for node in tuple(self._nodes):
                node.render(ctx)
        self._frame_index += 1

    def _on_pointer_down(self, x: float, y: float) -> Node | None:
        self._released = None
        stale = self._drag_candidate
        if stale is not None:
            if self._drag.is_dragging:
                logger.warning(
                    "drag_session_stuck node=%r: pointer-down before pointer-up, ending it", stale
                )
            self._drag.end(stale)
            self._drag_candidate = None
        candidate = hit_test(self._nodes, x, y)
        self._drag_candidate = candidate
        if candidate is not None:
            self._drag.begin(candidate, x, y)
        return candidate

    def _remove_now(self, node: Node) -> None:
        for index, existing in enumerate(self._nodes):
            if existing is node:
                del self._nodes[index]
                break
        node._bind_surface(None)
        if self._drag_candidate is node:
            self.cancel_drag()
        if self._released is node:
            self._released = None
        self.focus.release_subtree(node)
        node.unmounting()

    def _removal_pending(self, node: Node) -> bool:
        for action, pending in reversed(self._pending):
            if pending is node:
                return action == "remove"
        return False

    @contextmanager
    def _dispatch_pass(self) -> Iterator[None]:
        self._pass_depth += 1
        try:
            yield
        finally:
            self._pass_depth -= 1
            if self._pass_depth == 0 and self._pending:
                self._flush_pending()

    def _flush_pending(self) -> None:
        pending = self._pending
        self._pending = []
        for action, node in pending:
            if action == "add":
                node._bind_surface(self)
                self._nodes.append(node)
            elif action == "remove" and node.surface is self:
                self._remove_now(node)


__all__ = ["Surface"]
