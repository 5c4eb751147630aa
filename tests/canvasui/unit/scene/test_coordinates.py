from __future__ import annotations

from canvasui.api.geometry import Rect
from canvasui.scene.coordinates import absolute_bounds, absolute_position, iter_ancestors
from canvasui.scene.node import Node


def test_following_child_adds_parent_local_offset() -> None:
    parent = Node(10, 10, 100, 100)
    child = Node(5, 5, 10, 10)
    parent.add(child)

    assert absolute_position(child) == (15.0, 15.0)


def test_non_following_child_ignores_parent_offset() -> None:
    parent = Node(10, 10, 100, 100)
    child = Node(5, 5, 10, 10, follow_parent_offset=False)
    parent.add(child)

    assert absolute_position(child) == (5.0, 5.0)


def test_grandchild_sums_raw_locals_of_every_ancestor() -> None:
    root = Node(100, 0, 300, 300)
    middle = Node(10, 20, 100, 100, follow_parent_offset=False)
    leaf = Node(1, 2, 5, 5)
    root.add(middle)
    middle.add(leaf)

    # The leaf's own flag decides; the middle node's flag is irrelevant to it.
    assert absolute_position(leaf) == (111.0, 22.0)
    assert absolute_position(middle) == (10.0, 20.0)


def test_position_is_recomputed_after_ancestor_moves() -> None:
    root = Node(0, 0, 100, 100)
    child = Node(5, 5, 10, 10, follow_parent_offset=False)
    root.add(child)
    root.x = 50

    child.enable_parent_offset_following()

    assert absolute_position(child) == (55.0, 5.0)


def test_absolute_bounds_and_ancestor_iteration() -> None:
    root = Node(10, 10, 100, 100)
    child = Node(5, 5, 20, 30)
    root.add(child)

    assert absolute_bounds(child) == Rect(15.0, 15.0, 20.0, 30.0)
    assert list(iter_ancestors(child)) == [root]
    assert list(iter_ancestors(root)) == []
