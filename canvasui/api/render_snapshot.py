"""Immutable render snapshot contracts."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Affine2D:
    """2D affine transform ``(a, b, c, d, e, f)``.

    Maps ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``.
    """

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.values) != 6:
            raise ValueError("Affine2D must contain exactly 6 values")

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map one point through the transform."""
        a, b, c, d, e, f = self.values
        return a * x + c * y + e, b * x + d * y + f

    def then(self, inner: "Affine2D") -> "Affine2D":
        """Return ``self * inner``: apply ``inner`` first, then ``self``."""
        a1, b1, c1, d1, e1, f1 = self.values
        a2, b2, c2, d2, e2, f2 = inner.values
        return Affine2D(
            values=(
                a1 * a2 + c1 * b2,
                b1 * a2 + d1 * b2,
                a1 * c2 + c1 * d2,
                b1 * c2 + d1 * d2,
                a1 * e2 + c1 * f2 + e1,
                b1 * e2 + d1 * f2 + f1,
            )
        )

    @property
    def scale(self) -> float:
        """Uniform scale estimate used for line widths and radii."""
        a, b, c, d, _, _ = self.values
        return math.sqrt(abs(a * d - b * c))


IDENTITY_AFFINE = Affine2D(values=(1.0, 0.0, 0.0, 1.0, 0.0, 0.0))


def affine_translation(dx: float, dy: float) -> Affine2D:
    """Create a translation transform."""
    return Affine2D(values=(1.0, 0.0, 0.0, 1.0, float(dx), float(dy)))


def affine_rotation(angle: float) -> Affine2D:
    """Create a rotation transform (radians, clockwise in y-down space)."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Affine2D(values=(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0))


@dataclass(frozen=True, slots=True)
class RenderCommand:
    """One immutable draw command."""

    kind: str
    transform: Affine2D = IDENTITY_AFFINE
    data: tuple[tuple[str, object], ...] = ()

    def payload(self) -> dict[str, object]:
        """Return command data as a dict."""
        return dict(self.data)


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Immutable frame snapshot."""

    frame_index: int
    commands: tuple[RenderCommand, ...] = ()

    def kinds(self) -> tuple[str, ...]:
        """Return command kinds in draw order."""
        return tuple(command.kind for command in self.commands)


def create_render_snapshot(
    *,
    frame_index: int,
    commands: tuple[RenderCommand, ...] = (),
) -> RenderSnapshot:
    """Create a render snapshot value."""
    return RenderSnapshot(frame_index=frame_index, commands=commands)


__all__ = [
    "Affine2D",
    "IDENTITY_AFFINE",
    "RenderCommand",
    "RenderSnapshot",
    "affine_rotation",
    "affine_translation",
    "create_render_snapshot",
]
