"""Geometry value types shared by the scene graph and drawing backends."""

from __future__ import annotations

import math
from dataclasses import dataclass

from canvasui.api.errors import InvalidGeometryError


@dataclass(frozen=True, slots=True)
class Point:
    """Surface-local point."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle (edges included)."""
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


def validate_size(width: float, height: float) -> tuple[float, float]:
    """Return the size as floats or raise when it is negative or non-finite."""
    try:
        w = float(width)
        h = float(height)
    except (TypeError, ValueError) as exc:
        raise InvalidGeometryError(f"size must be numeric: {width!r}x{height!r}") from exc
    if not (math.isfinite(w) and math.isfinite(h)):
        raise InvalidGeometryError(f"size must be finite: {w!r}x{h!r}")
    if w < 0.0 or h < 0.0:
        raise InvalidGeometryError(f"size must be non-negative: {w!r}x{h!r}")
    return w, h


__all__ = ["Point", "Rect", "validate_size"]
