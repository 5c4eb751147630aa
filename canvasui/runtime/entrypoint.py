"""Public entrypoint: host a surface in a desktop window until it closes."""

from __future__ import annotations

import logging

from canvasui.runtime.config import RuntimeConfig, initialize_runtime_config, set_runtime_config
from canvasui.runtime.logging import configure_logging, stop_logging
from canvasui.scene.surface import Surface
from canvasui.window.rendercanvas_host import RenderCanvasHost, create_render_canvas_host

logger = logging.getLogger(__name__)


def run(surface: Surface, *, config: RuntimeConfig | None = None) -> RenderCanvasHost:
    """Configure logging, open a window for ``surface`` and block in the event loop."""
    resolved = set_runtime_config(config) if config is not None else initialize_runtime_config()
    configure_logging(resolved.logging)
    window = resolved.window
    logger.info(
        "canvasui_start width=%d height=%d mode=%s update_mode=%s nodes=%d",
        window.width,
        window.height,
        window.window_mode,
        window.update_mode,
        len(surface.nodes),
    )
    host = create_render_canvas_host(surface, config=resolved)
    try:
        host.run_loop()
    finally:
        logger.info("canvasui_stop frames=%d", host.frame_index)
        stop_logging()
    return host


__all__ = ["run"]
