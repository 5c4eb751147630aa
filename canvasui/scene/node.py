"""Scene-graph node: geometry, ownership, lifecycle and default behaviour."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from canvasui.api.drawing import DrawingSurface
from canvasui.api.errors import CyclicAttachError, NodeAlreadyAttachedError
from canvasui.api.geometry import Rect, validate_size
from canvasui.api.input_events import CLICK, POINTER_DOWN_TYPES, RIGHT_CLICK, KeyEvent
from canvasui.scene.coordinates import absolute_bounds, absolute_position, iter_ancestors
from canvasui.scene.routing import MouseEvent

if TYPE_CHECKING:
    from canvasui.scene.surface import Surface

logger = logging.getLogger(__name__)

ClickHandler = Callable[[MouseEvent], None]


class Node:
    """Positioned, sized, rotatable rectangle with optional children.

    ``x``/``y`` are parent-relative. The parent link is weak: a child's
    lifetime belongs to the ``children`` list that holds it.
    """

    default_color = "gray"

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str | None = None,
        *,
        draggable: bool = False,
        follow_parent_offset: bool = True,
    ) -> None:
        w, h = validate_size(width, height)
        self.x = float(x)
        self.y = float(y)
        self.width = w
        self.height = h
        self.rotation = 0.0
        self._color = self.default_color if color is None else color
        self.draggable = draggable
        self.follow_parent_offset = follow_parent_offset
        self.children: list[Node] = []
        self.state: dict[str, object] = {}
        self.props: dict[str, object] = {}
        self.is_dragging = False
        self.drag_origin: tuple[float, float] = (0.0, 0.0)
        self.click_handler: ClickHandler | None = None
        self.right_click_handler: ClickHandler | None = None
        self._parent_ref: weakref.ref[Node] | None = None
        self._surface_ref: weakref.ref[Surface] | None = None
        self.mounted()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x:g}, y={self.y:g}, "
            f"width={self.width:g}, height={self.height:g})"
        )

    # Ownership

    @property
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._color = value

    @property
    def parent(self) -> Node | None:
        """Return the owning parent node, if still alive and attached."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def surface(self) -> "Surface | None":
        """Return the surface holding this node as a top-level node."""
        if self._surface_ref is None:
            return None
        return self._surface_ref()

    @property
    def is_attached(self) -> bool:
        return self.parent is not None or self.surface is not None

    def add(self, child: Node) -> None:
        """Attach ``child`` as the last child of this node."""
        if child is self or any(ancestor is child for ancestor in iter_ancestors(self)):
            raise CyclicAttachError(f"{child!r} is an ancestor of {self!r}")
        if child.is_attached:
            raise NodeAlreadyAttachedError(f"{child!r} must be detached before re-adding")
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        logger.debug("node_child_added parent=%r child=%r", self, child)
        self.updated()

    def remove(self, child: Node) -> None:
        """Detach ``child``; removing a node that is not a child does nothing."""
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                break
        else:
            return
        child._parent_ref = None
        logger.debug("node_child_removed parent=%r child=%r", self, child)
        surface = self.root_surface()
        if surface is not None:
            surface.focus.release_subtree(child)
        child.unmounting()
        self.updated()

    def detach(self) -> None:
        """Remove this node from whichever parent or surface owns it."""
        parent = self.parent
        if parent is not None:
            parent.remove(self)
            return
        surface = self.surface
        if surface is not None:
            surface.remove_node(self)

    def root_surface(self) -> "Surface | None":
        """Return the surface holding this node's top-level ancestor, if any."""
        root = self
        for ancestor in iter_ancestors(self):
            root = ancestor
        return root.surface

    def _bind_surface(self, surface: "Surface | None") -> None:
        self._surface_ref = None if surface is None else weakref.ref(surface)

    # Geometry

    def absolute_position(self) -> tuple[float, float]:
        return absolute_position(self)

    def bounds(self) -> Rect:
        return absolute_bounds(self)

    def move_to(self, x: float, y: float) -> None:
        """Set the local position and shift offset-following children by the delta."""
        dx = float(x) - self.x
        dy = float(y) - self.y
        self.x = float(x)
        self.y = float(y)
        self._shift_children(dx, dy)
        self.updated()

    def move_by(self, dx: float, dy: float) -> None:
        """Add a delta to the local position, cascading to following children."""
        self.x += float(dx)
        self.y += float(dy)
        self._shift_children(float(dx), float(dy))
        self.updated()

    def _shift_children(self, dx: float, dy: float) -> None:
        for child in tuple(self.children):
            if child.follow_parent_offset:
                child.move_by(dx, dy)

    def resize(self, width: float, height: float) -> None:
        """Set the size; children are not scaled."""
        w, h = validate_size(width, height)
        if w == self.width and h == self.height:
            return
        self.width = w
        self.height = h
        self.updated()

    def turn(self, angle: float) -> None:
        """Rotate by ``angle`` radians relative to the current rotation."""
        self.rotation += float(angle)
        self.updated()

    def enable_parent_offset_following(self) -> None:
        self.follow_parent_offset = True

    def disable_parent_offset_following(self) -> None:
        self.follow_parent_offset = False

    # State

    def set_state(self, partial: Mapping[str, object]) -> None:
        previous = dict(self.state)
        self.state = {**self.state, **partial}
        self.updated(previous, dict(self.state))

    def set_props(self, partial: Mapping[str, object]) -> None:
        previous = dict(self.props)
        self.props = {**self.props, **partial}
        self.updated(previous, dict(self.props))

    # Lifecycle hooks

    def mounted(self) -> None:
        """Called once at the end of construction."""

    def updated(
        self,
        previous: Mapping[str, object] | None = None,
        current: Mapping[str, object] | None = None,
    ) -> None:
        """Called after every mutation; snapshots only for state/props changes."""

    def unmounting(self) -> None:
        """Called when the node is removed from its parent or surface."""

    # Input

    def inside_test(self, x: float, y: float) -> bool:
        """Return whether a surface point hits this node (rotation ignored)."""
        return self.bounds().contains(x, y)

    def start_dragging(self, x: float, y: float) -> None:
        """Begin a drag session at surface point ``(x, y)`` if draggable."""
        if not self.draggable:
            return
        self.is_dragging = True
        abs_x, abs_y = self.absolute_position()
        self.drag_origin = (float(x) - abs_x, float(y) - abs_y)

    def handle_dragging(self, x: float, y: float) -> None:
        """Track the pointer, keeping the grab offset captured at drag start."""
        if not self.draggable or not self.is_dragging:
            return
        origin_x, origin_y = self.drag_origin
        self.move_to(float(x) - origin_x, float(y) - origin_y)
        self.updated()

    def stop_dragging(self) -> None:
        self.is_dragging = False

    def handle_mouse_event(self, event_type: str, event: MouseEvent) -> None:
        """Notify this node, then every descendant, of a mouse event."""
        if event_type == CLICK:
            self.on_mouse_click(event)
        elif event_type == RIGHT_CLICK:
            self.on_right_mouse_click(event)
        elif event_type in POINTER_DOWN_TYPES:
            self.start_dragging(event.x, event.y)
        for child in tuple(self.children):
            child.handle_mouse_event(event_type, event)

    def on_mouse_click(self, event: MouseEvent) -> None:
        if self.click_handler is not None:
            self.click_handler(event)

    def on_right_mouse_click(self, event: MouseEvent) -> None:
        if self.right_click_handler is not None:
            self.right_click_handler(event)

    def handle_key(self, event: KeyEvent) -> bool:
        """Handle a key/char event while focused; return whether it was consumed."""
        return False

    def on_focus_lost(self) -> None:
        """Called when keyboard focus moves elsewhere."""

    # Rendering

    def render(self, ctx: DrawingSurface) -> None:
        """Paint this node in its own rotated frame, then render children.

        Children are positioned from the ancestor-offset sum, not from this
        node's rotated frame, so rotation never affects child layout.
        """
        abs_x, abs_y = self.absolute_position()
        with ctx.saved():
            ctx.translate(abs_x + self.width / 2.0, abs_y + self.height / 2.0)
            ctx.rotate(self.rotation)
            self.paint(ctx)
        for child in tuple(self.children):
            child.render(ctx)

    def paint(self, ctx: DrawingSurface) -> None:
        """Draw the node centered on the origin of the current transform."""
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        ctx.fill_rect(-half_w, -half_h, self.width, self.height, self.color)
        ctx.stroke_rect(-half_w, -half_h, self.width, self.height, "black")


__all__ = ["ClickHandler", "Node"]
