from __future__ import annotations

from canvasui.scene.drag import DRAG_IDLE, DragController, Dragging
from canvasui.scene.node import Node


def test_begin_records_session_for_draggable_node() -> None:
    controller = DragController()
    node = Node(40, 40, 20, 20, draggable=True)

    assert controller.begin(node, 50, 50) is True
    assert controller.state == Dragging(node=node, origin_x=10.0, origin_y=10.0)
    assert controller.is_dragging is True


def test_declined_drag_stays_idle() -> None:
    controller = DragController()
    node = Node(40, 40, 20, 20)

    assert controller.begin(node, 50, 50) is False
    assert controller.state is DRAG_IDLE
    assert controller.drag_to(70, 70) is False
    assert (node.x, node.y) == (40.0, 40.0)


def test_drag_round_trip_returns_to_idle() -> None:
    controller = DragController()
    node = Node(40, 40, 20, 20, draggable=True)

    controller.begin(node, 50, 50)
    controller.drag_to(70, 70)
    controller.end(node)

    assert node.absolute_position() == (60.0, 60.0)
    assert node.is_dragging is False
    assert controller.state is DRAG_IDLE


def test_end_with_other_node_still_stops_session_node() -> None:
    controller = DragController()
    dragged = Node(0, 0, 10, 10, draggable=True)
    other = Node(0, 0, 10, 10)
    controller.begin(dragged, 1, 1)

    controller.end(other)

    assert dragged.is_dragging is False
    assert controller.state is DRAG_IDLE


def test_cancel_stops_active_session() -> None:
    controller = DragController()
    node = Node(0, 0, 10, 10, draggable=True)
    controller.begin(node, 1, 1)

    assert controller.cancel() is True
    assert controller.cancel() is False
    assert node.is_dragging is False
