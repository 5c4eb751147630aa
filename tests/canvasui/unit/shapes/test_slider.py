from __future__ import annotations

import pytest

from canvasui.api.errors import InvalidGeometryError
from canvasui.rendering.recording_surface import RecordingSurface
from canvasui.scene.drag import Dragging
from canvasui.scene.surface import Surface
from canvasui.shapes import Slider
from tests.canvasui.conftest import pointer


def test_value_is_clamped_into_range() -> None:
    assert Slider(0, 0, 100, 20, value=500).value == 100.0
    assert Slider(0, 0, 100, 20, value=-5).value == 0.0


@pytest.mark.parametrize(("low", "high"), [(10, 10), (10, 0)])
def test_empty_or_inverted_range_is_rejected(low: float, high: float) -> None:
    with pytest.raises(InvalidGeometryError):
        Slider(0, 0, 100, 20, min_value=low, max_value=high)


@pytest.mark.parametrize("handle_size", [-1.0, 101.0, float("nan")])
def test_handle_must_fit_the_track(handle_size: float) -> None:
    with pytest.raises(InvalidGeometryError):
        Slider(0, 0, 100, 20, handle_size=handle_size)


def test_handle_as_wide_as_the_track_is_accepted() -> None:
    slider = Slider(0, 0, 100, 20, handle_size=100)

    assert slider.handle_offset() == 0.0


def test_only_the_handle_is_hittable() -> None:
    slider = Slider(0, 0, 220, 20, value=50, handle_size=20)

    assert slider.handle_offset() == 100.0
    assert slider.inside_test(110, 10) is True
    assert slider.inside_test(10, 10) is False
    assert slider.inside_test(210, 10) is False


def test_dragging_the_handle_changes_value_not_position() -> None:
    values: list[float] = []
    surface = Surface()
    slider = Slider(0, 0, 200, 20, value=50, on_value_change=values.append)
    surface.add_node(slider)
    handle_x = slider.handle_offset() + 5

    surface.dispatch("pointer_down", pointer("pointer_down", handle_x, 10))
    assert isinstance(surface.drag_state, Dragging)
    surface.dispatch("pointer_move", pointer("pointer_move", 150, 10))
    surface.dispatch("pointer_move", pointer("pointer_move", 900, 10))
    surface.dispatch("pointer_up", pointer("pointer_up", 900, 10))

    assert values == [75.0, 100.0]
    assert slider.value == 100.0
    assert (slider.x, slider.y) == (0.0, 0.0)
    assert slider.is_dragging is False


def test_paint_shows_rounded_value() -> None:
    slider = Slider(0, 0, 200, 20, value=42.5)
    ctx = RecordingSurface(300, 100)
    ctx.clear()

    slider.render(ctx)

    label = next(c for c in ctx.commands if c.kind == "fill_text")
    assert label.payload()["text"] == "43"
    assert "fill_arc" in ctx.snapshot().kinds()
