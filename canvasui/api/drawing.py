"""Drawing-surface contract consumed by node render passes."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from typing import Protocol


class DrawingSurface(Protocol):
    """Immediate-mode 2D drawing capabilities used inside ``Node.render``.

    Coordinates passed to the primitives are in the current transform frame.
    ``save``/``restore`` bracket transform changes; ``saved`` is the scoped form.
    """

    @property
    def width(self) -> int:
        """Surface width in pixels."""

    @property
    def height(self) -> int:
        """Surface height in pixels."""

    def save(self) -> None:
        """Push the current transform."""

    def restore(self) -> None:
        """Pop back to the last saved transform."""

    def saved(self) -> AbstractContextManager[None]:
        """Context manager pairing ``save`` with ``restore``."""

    def translate(self, dx: float, dy: float) -> None:
        """Translate the current transform."""

    def rotate(self, angle: float) -> None:
        """Rotate the current transform by ``angle`` radians."""

    def clear(self) -> None:
        """Clear the whole surface, ignoring the current transform."""

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        """Fill a rectangle."""

    def stroke_rect(
        self, x: float, y: float, w: float, h: float, color: str, line_width: float = 1.0
    ) -> None:
        """Outline a rectangle."""

    def fill_arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start: float,
        end: float,
        color: str,
    ) -> None:
        """Fill a circular sector (a full circle for ``0..2*pi``)."""

    def stroke_arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start: float,
        end: float,
        color: str,
        line_width: float = 1.0,
    ) -> None:
        """Outline a circular arc."""

    def fill_path(self, points: Sequence[tuple[float, float]], color: str) -> None:
        """Fill a closed polygon."""

    def stroke_path(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        line_width: float = 1.0,
        closed: bool = False,
    ) -> None:
        """Stroke a polyline."""

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        color: str,
        font_size: float = 16.0,
        align: str = "left",
        baseline: str = "top",
        max_width: float | None = None,
    ) -> None:
        """Draw one line of text anchored by ``align``/``baseline``."""


class TransformScopeMixin:
    """Provides ``saved`` on top of ``save``/``restore``."""

    def save(self) -> None:  # pragma: no cover - implemented by concrete surfaces
        raise NotImplementedError

    def restore(self) -> None:  # pragma: no cover - implemented by concrete surfaces
        raise NotImplementedError

    @contextmanager
    def saved(self) -> Iterator[None]:
        self.save()
        try:
            yield
        finally:
            self.restore()


__all__ = ["DrawingSurface", "TransformScopeMixin"]
