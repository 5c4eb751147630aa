from __future__ import annotations

from canvasui.scene.hit_test import hit_test
from canvasui.scene.node import Node


def test_frontmost_overlapping_node_wins() -> None:
    back = Node(0, 0, 100, 100)
    front = Node(50, 50, 100, 100)

    assert hit_test([back, front], 75, 75) is front
    assert hit_test([back, front], 10, 10) is back
    assert hit_test([back, front], 500, 500) is None


def test_edges_are_inclusive() -> None:
    node = Node(10, 10, 20, 20)

    assert hit_test([node], 10, 10) is node
    assert hit_test([node], 30, 30) is node
    assert hit_test([node], 30.01, 30) is None


def test_children_are_never_selected() -> None:
    parent = Node(0, 0, 10, 10)
    child = Node(100, 100, 20, 20, follow_parent_offset=False)
    parent.add(child)

    assert hit_test([parent], 110, 110) is None


def test_rotation_is_ignored() -> None:
    node = Node(0, 0, 100, 10)
    node.turn(1.2)

    assert hit_test([node], 90, 5) is node
