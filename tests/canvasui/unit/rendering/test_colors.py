from __future__ import annotations

import pytest

from canvasui.rendering.colors import FALLBACK_RGBA, darken_color, parse_color, resolve_color


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("#fff", (255, 255, 255, 255)),
        ("#0008", (0, 0, 0, 136)),
        ("#4CAF50", (76, 175, 80, 255)),
        ("#11223344", (17, 34, 51, 68)),
        ("rgb(1, 2, 3)", (1, 2, 3, 255)),
        ("rgba(0, 0, 0, 0.1)", (0, 0, 0, 26)),
        ("  LightGray ", (211, 211, 211, 255)),
        ("transparent", (0, 0, 0, 0)),
    ],
)
def test_parse_color_accepts_supported_forms(token: str, expected) -> None:
    assert parse_color(token) == expected


@pytest.mark.parametrize("token", ["", "#12", "#zzzzzz", "rgb(1,2)", "rgba(1,2,3)", "chartreuse-ish"])
def test_parse_color_rejects_unknown_tokens(token: str) -> None:
    assert parse_color(token) is None


def test_resolve_color_falls_back() -> None:
    assert resolve_color("nope") == FALLBACK_RGBA
    assert resolve_color("nope", (1, 2, 3, 4)) == (1, 2, 3, 4)


def test_darken_color_scales_channels_and_passes_unknown_through() -> None:
    assert darken_color("#ffffff") == "rgb(204,204,204)"
    assert darken_color("lightgray", 0.5) == "rgb(106,106,106)"
    assert darken_color("mystery") == "mystery"
