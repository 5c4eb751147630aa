"""Input-routing context handed to nodes during dispatch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from canvasui.api.input_events import KeyEvent, PointerEvent
from canvasui.scene.coordinates import iter_ancestors

if TYPE_CHECKING:
    from canvasui.scene.node import Node

logger = logging.getLogger(__name__)


class KeyboardFocus:
    """Tracks which node receives key/char events.

    Owned by a ``Surface``; nodes request or release focus through the
    ``MouseEvent`` they are handed instead of registering global listeners.
    """

    def __init__(self) -> None:
        self._owner: Node | None = None

    @property
    def owner(self) -> "Node | None":
        """Return the focused node, if any."""
        return self._owner

    def request(self, node: "Node") -> None:
        """Move focus to ``node``, blurring the previous owner."""
        previous = self._owner
        if previous is node:
            return
        self._owner = node
        if previous is not None:
            previous.on_focus_lost()
        logger.debug("focus_changed owner=%s previous=%s", type(node).__name__, _name(previous))

    def release(self, node: "Node") -> None:
        """Drop focus if ``node`` currently owns it."""
        if self._owner is not node:
            return
        self._owner = None
        logger.debug("focus_released owner=%s", type(node).__name__)

    def release_subtree(self, root: "Node") -> bool:
        """Blur the owner if it is ``root`` or one of its descendants."""
        owner = self._owner
        if owner is None:
            return False
        if owner is not root and not any(a is root for a in iter_ancestors(owner)):
            return False
        self.clear()
        logger.debug("focus_released_with_subtree root=%s", type(root).__name__)
        return True

    def clear(self) -> None:
        """Blur the current owner, if any."""
        previous = self._owner
        self._owner = None
        if previous is not None:
            previous.on_focus_lost()

    def dispatch(self, event: KeyEvent) -> bool:
        """Deliver a key/char event to the focused node."""
        owner = self._owner
        if owner is None:
            return False
        return bool(owner.handle_key(event))


@dataclass(frozen=True, slots=True)
class MouseEvent:
    """Mouse notification delivered to a node and its subtree."""

    x: float
    y: float
    raw: PointerEvent | None = None
    focus: KeyboardFocus | None = None
    # Top-level node whose press ended with the pointer-up preceding this click.
    released: "Node | None" = None


def _name(node: "Node | None") -> str:
    return "none" if node is None else type(node).__name__


__all__ = ["KeyboardFocus", "MouseEvent"]
