from __future__ import annotations

import math

import pytest

from canvasui.api.render_snapshot import IDENTITY_AFFINE
from canvasui.rendering.transform_stack import TransformStack


def test_translate_then_rotate_composes_in_canvas_order() -> None:
    stack = TransformStack(100, 100)
    stack.translate(10, 20)
    stack.rotate(math.pi / 2)

    assert stack.transform.apply(1, 0) == pytest.approx((10.0, 21.0))
    assert stack.transform.scale == pytest.approx(1.0)


def test_saved_scope_restores_even_on_error() -> None:
    stack = TransformStack(100, 100)

    with pytest.raises(RuntimeError):
        with stack.saved():
            stack.translate(5, 5)
            raise RuntimeError("boom")

    assert stack.transform == IDENTITY_AFFINE
    assert stack.depth == 0


def test_unbalanced_restore_is_ignored() -> None:
    stack = TransformStack(100, 100)
    stack.translate(1, 1)
    before = stack.transform

    stack.restore()

    assert stack.transform == before


def test_zero_rotation_keeps_transform_identity() -> None:
    stack = TransformStack(100, 100)
    stack.rotate(0.0)

    assert stack.transform is IDENTITY_AFFINE


def test_target_size_is_at_least_one_pixel() -> None:
    stack = TransformStack(0, -5)
    assert (stack.width, stack.height) == (1, 1)

    stack.resize_target(640, 480)
    assert (stack.width, stack.height) == (640, 480)
