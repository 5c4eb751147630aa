"""numpy-backed RGBA raster implementation of the drawing surface."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from canvasui.api.render_snapshot import Affine2D
from canvasui.rendering.bitmap_font import iter_glyph_runs, layout_text
from canvasui.rendering.colors import RGBA, resolve_color
from canvasui.rendering.transform_stack import TransformStack

# Segments used to approximate a full circle of radius ``r`` scale with ``r``.
_MIN_ARC_SEGMENTS = 12
_MAX_ARC_SEGMENTS = 256


class RasterSurface(TransformStack):
    """Software rasterizer over an ``(height, width, 4)`` uint8 framebuffer.

    Shapes are converted to device-space polygons through the current
    transform and filled with an even-odd rule sampled at pixel centers;
    strokes are distance-to-segment masks. No anti-aliasing.
    """

    def __init__(self, width: int, height: int, background: str = "white") -> None:
        super().__init__(width, height)
        self.background = background
        self.pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)

    def resize_target(self, width: int, height: int) -> None:
        super().resize_target(width, height)
        if self.pixels.shape[:2] != (self.height, self.width):
            self.pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)

    def pixel(self, x: int, y: int) -> RGBA:
        """Return the RGBA value at device pixel ``(x, y)``."""
        r, g, b, a = (int(channel) for channel in self.pixels[int(y), int(x)])
        return (r, g, b, a)

    def clear(self) -> None:
        self.reset_transform()
        self.pixels[:, :] = np.array(resolve_color(self.background), dtype=np.uint8)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        rgba = resolve_color(color)
        if rgba[3] == 0 or w <= 0.0 or h <= 0.0:
            return
        if _is_translation(self.transform):
            dx, dy = self.transform.values[4], self.transform.values[5]
            self._fill_device_rect(x + dx, y + dy, w, h, rgba)
            return
        self._fill_polygon(self._to_device(_rect_points(x, y, w, h)), rgba)

    def stroke_rect(
        self, x: float, y: float, w: float, h: float, color: str, line_width: float = 1.0
    ) -> None:
        self._stroke_polyline(
            self._to_device(_rect_points(x, y, w, h)), resolve_color(color), line_width, closed=True
        )

    def fill_arc(
        self, cx: float, cy: float, radius: float, start: float, end: float, color: str
    ) -> None:
        if radius <= 0.0:
            return
        points = _arc_points(cx, cy, radius, start, end)
        if not _is_full_turn(start, end):
            points = [(cx, cy), *points]
        self._fill_polygon(self._to_device(points), resolve_color(color))

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
        if radius <= 0.0:
            return
        points = _arc_points(cx, cy, radius, start, end)
        self._stroke_polyline(
            self._to_device(points), resolve_color(color), line_width, closed=_is_full_turn(start, end)
        )

    def fill_path(self, points: Sequence[tuple[float, float]], color: str) -> None:
        if len(points) < 3:
            return
        self._fill_polygon(self._to_device(points), resolve_color(color))

    def stroke_path(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        line_width: float = 1.0,
        closed: bool = False,
    ) -> None:
        if len(points) < 2:
            return
        self._stroke_polyline(self._to_device(points), resolve_color(color), line_width, closed=closed)

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
        if not text:
            return
        layout = layout_text(
            text, x, y, font_size=font_size, align=align, baseline=baseline, max_width=max_width
        )
        for run_x, run_y, run_w, run_h in iter_glyph_runs(layout):
            self.fill_rect(run_x, run_y, run_w, run_h, color)

    def _to_device(self, points: Sequence[tuple[float, float]]) -> np.ndarray:
        a, b, c, d, e, f = self.transform.values
        local = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        xs = a * local[:, 0] + c * local[:, 1] + e
        ys = b * local[:, 0] + d * local[:, 1] + f
        return np.stack([xs, ys], axis=1)

    def _fill_device_rect(self, x: float, y: float, w: float, h: float, rgba: RGBA) -> None:
        x0 = max(0, int(math.floor(x + 0.5)))
        y0 = max(0, int(math.floor(y + 0.5)))
        x1 = min(self.width, int(math.floor(x + w + 0.5)))
        y1 = min(self.height, int(math.floor(y + h + 0.5)))
        if x1 <= x0 or y1 <= y0:
            return
        mask = np.ones((y1 - y0, x1 - x0), dtype=bool)
        self._blend(x0, y0, mask, rgba)

    def _fill_polygon(self, device: np.ndarray, rgba: RGBA) -> None:
        if rgba[3] == 0 or len(device) < 3:
            return
        window = self._clip_window(device, pad=0.0)
        if window is None:
            return
        x0, y0, x1, y1 = window
        px, py = _pixel_centers(x0, y0, x1, y1)
        inside = np.zeros(px.shape, dtype=bool)
        count = len(device)
        for index in range(count):
            ax, ay = device[index]
            bx, by = device[(index + 1) % count]
            if ay == by:
                continue
            crosses = (ay > py) != (by > py)
            x_at = (bx - ax) * (py - ay) / (by - ay) + ax
            inside ^= crosses & (px < x_at)
        self._blend(x0, y0, inside, rgba)

    def _stroke_polyline(
        self, device: np.ndarray, rgba: RGBA, line_width: float, *, closed: bool
    ) -> None:
        if rgba[3] == 0 or len(device) < 2:
            return
        half = max(0.5, float(line_width) * self.transform.scale / 2.0)
        window = self._clip_window(device, pad=half)
        if window is None:
            return
        x0, y0, x1, y1 = window
        px, py = _pixel_centers(x0, y0, x1, y1)
        covered = np.zeros(px.shape, dtype=bool)
        count = len(device)
        segments = count if closed else count - 1
        for index in range(segments):
            ax, ay = device[index]
            bx, by = device[(index + 1) % count]
            covered |= _segment_distance(px, py, ax, ay, bx, by) <= half
        self._blend(x0, y0, covered, rgba)

    def _clip_window(self, device: np.ndarray, *, pad: float) -> tuple[int, int, int, int] | None:
        x0 = max(0, int(math.floor(float(device[:, 0].min()) - pad)))
        y0 = max(0, int(math.floor(float(device[:, 1].min()) - pad)))
        x1 = min(self.width, int(math.ceil(float(device[:, 0].max()) + pad)))
        y1 = min(self.height, int(math.ceil(float(device[:, 1].max()) + pad)))
        if x1 <= x0 or y1 <= y0:
            return None
        return x0, y0, x1, y1

    def _blend(self, x0: int, y0: int, mask: np.ndarray, rgba: RGBA) -> None:
        if not mask.any():
            return
        h, w = mask.shape
        region = self.pixels[y0 : y0 + h, x0 : x0 + w]
        alpha = rgba[3] / 255.0
        source = np.array(rgba[:3], dtype=np.float64)
        if alpha >= 1.0:
            region[mask, :3] = source.astype(np.uint8)
            region[mask, 3] = 255
            return
        current = region[mask, :3].astype(np.float64)
        blended = source * alpha + current * (1.0 - alpha)
        region[mask, :3] = np.clip(np.rint(blended), 0, 255).astype(np.uint8)
        dest_alpha = region[mask, 3].astype(np.float64) / 255.0
        coverage = (alpha + dest_alpha * (1.0 - alpha)) * 255.0
        region[mask, 3] = np.clip(np.rint(coverage), 0, 255).astype(np.uint8)


def _is_translation(transform: Affine2D) -> bool:
    a, b, c, d, _, _ = transform.values
    return a == 1.0 and b == 0.0 and c == 0.0 and d == 1.0


def _rect_points(x: float, y: float, w: float, h: float) -> list[tuple[float, float]]:
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]


def _is_full_turn(start: float, end: float) -> bool:
    return abs(end - start) >= 2.0 * math.pi - 1e-9


def _arc_points(
    cx: float, cy: float, radius: float, start: float, end: float
) -> list[tuple[float, float]]:
    sweep = end - start
    full = _is_full_turn(start, end)
    if full:
        sweep = 2.0 * math.pi
    segments = int(min(_MAX_ARC_SEGMENTS, max(_MIN_ARC_SEGMENTS, radius)))
    steps = max(2, int(math.ceil(segments * abs(sweep) / (2.0 * math.pi))))
    count = steps if full else steps + 1
    return [
        (cx + radius * math.cos(start + sweep * i / steps), cy + radius * math.sin(start + sweep * i / steps))
        for i in range(count)
    ]


def _pixel_centers(x0: int, y0: int, x1: int, y1: int) -> tuple[np.ndarray, np.ndarray]:
    xs = np.arange(x0, x1, dtype=np.float64) + 0.5
    ys = np.arange(y0, y1, dtype=np.float64) + 0.5
    return np.meshgrid(xs, ys)


def _segment_distance(
    px: np.ndarray, py: np.ndarray, ax: float, ay: float, bx: float, by: float
) -> np.ndarray:
    dx = bx - ax
    dy = by - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return np.hypot(px - ax, py - ay)
    t = np.clip(((px - ax) * dx + (py - ay) * dy) / length_sq, 0.0, 1.0)
    return np.hypot(px - (ax + t * dx), py - (ay + t * dy))


__all__ = ["RasterSurface"]
