"""Color-token parsing shared by drawing backends."""

from __future__ import annotations

import re

RGBA = tuple[int, int, int, int]

NAMED_COLORS: dict[str, RGBA] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "gray": (128, 128, 128, 255),
    "grey": (128, 128, 128, 255),
    "lightgray": (211, 211, 211, 255),
    "lightgrey": (211, 211, 211, 255),
    "darkgray": (169, 169, 169, 255),
    "darkgrey": (169, 169, 169, 255),
    "red": (255, 0, 0, 255),
    "green": (0, 128, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    "orange": (255, 165, 0, 255),
    "purple": (128, 0, 128, 255),
    "pink": (255, 192, 203, 255),
    "cyan": (0, 255, 255, 255),
    "magenta": (255, 0, 255, 255),
    "brown": (165, 42, 42, 255),
    "lightblue": (173, 216, 230, 255),
    "lightgreen": (144, 238, 144, 255),
    "navy": (0, 0, 128, 255),
    "skyblue": (135, 206, 235, 255),
    "tomato": (255, 99, 71, 255),
    "gold": (255, 215, 0, 255),
    "khaki": (240, 230, 140, 255),
    "plum": (221, 160, 221, 255),
    "mediumseagreen": (60, 179, 113, 255),
    "transparent": (0, 0, 0, 0),
}

FALLBACK_RGBA: RGBA = (255, 255, 255, 255)

_FUNCTIONAL_RE = re.compile(r"^(rgba?)\(([^)]*)\)$")


def parse_color(token: str) -> RGBA | None:
    """Parse a hex, ``rgb()``/``rgba()`` or named color token into 0-255 RGBA."""
    normalized = str(token).strip().lower()
    if not normalized:
        return None
    if normalized.startswith("#"):
        return _parse_hex_rgba(normalized)
    match = _FUNCTIONAL_RE.match(normalized.replace(" ", ""))
    if match is not None:
        return _parse_functional(match.group(1), match.group(2))
    return NAMED_COLORS.get(normalized)


def resolve_color(token: str, fallback: RGBA = FALLBACK_RGBA) -> RGBA:
    """Parse ``token``, substituting ``fallback`` for unknown values."""
    parsed = parse_color(token)
    return fallback if parsed is None else parsed


def darken_color(token: str, factor: float = 0.8) -> str:
    """Return an ``rgb()`` token scaled by ``factor``; unknown tokens pass through."""
    parsed = parse_color(token)
    if parsed is None:
        return token
    r, g, b, _ = parsed
    return f"rgb({_scale(r, factor)},{_scale(g, factor)},{_scale(b, factor)})"


def _scale(channel: int, factor: float) -> int:
    return max(0, min(255, int(round(channel * factor))))


def _parse_hex_rgba(normalized: str) -> RGBA | None:
    value = normalized.removeprefix("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value) + "ff"
    elif len(value) == 4:
        value = "".join(ch * 2 for ch in value)
    elif len(value) == 6:
        value = value + "ff"
    if len(value) != 8:
        return None
    try:
        r = int(value[0:2], 16)
        g = int(value[2:4], 16)
        b = int(value[4:6], 16)
        a = int(value[6:8], 16)
    except ValueError:
        return None
    return (r, g, b, a)


def _parse_functional(kind: str, body: str) -> RGBA | None:
    parts = [part for part in body.split(",") if part]
    expected = 4 if kind == "rgba" else 3
    if len(parts) != expected:
        return None
    try:
        channels = [max(0, min(255, int(round(float(part))))) for part in parts[:3]]
        alpha = 255
        if kind == "rgba":
            alpha = max(0, min(255, int(round(float(parts[3]) * 255.0))))
    except ValueError:
        return None
    return (channels[0], channels[1], channels[2], alpha)


__all__ = ["FALLBACK_RGBA", "NAMED_COLORS", "RGBA", "darken_color", "parse_color", "resolve_color"]
