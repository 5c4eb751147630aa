"""Absolute-position resolution over the parent chain."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from canvasui.api.geometry import Rect

if TYPE_CHECKING:
    from canvasui.scene.node import Node


def absolute_position(node: "Node") -> tuple[float, float]:
    """Return the node's surface position.

    Ancestors contribute their raw local coordinates, and only when the node
    itself follows parent offsets. Nothing is cached.
    """
    abs_x = float(node.x)
    abs_y = float(node.y)
    follow = node.follow_parent_offset
    current = node.parent
    while current is not None:
        if follow:
            abs_x += float(current.x)
            abs_y += float(current.y)
        current = current.parent
    return abs_x, abs_y


def absolute_bounds(node: "Node") -> Rect:
    """Return the node's unrotated bounding box in surface coordinates."""
    abs_x, abs_y = absolute_position(node)
    return Rect(abs_x, abs_y, float(node.width), float(node.height))


def iter_ancestors(node: "Node") -> Iterator["Node"]:
    """Yield the parent chain from nearest to root."""
    current = node.parent
    while current is not None:
        yield current
        current = current.parent


__all__ = ["absolute_bounds", "absolute_position", "iter_ancestors"]
