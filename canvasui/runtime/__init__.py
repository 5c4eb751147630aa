"""Runtime configuration, logging and entrypoint."""

from canvasui.runtime.config import (
    RuntimeConfig,
    RuntimeInputConfig,
    RuntimeRenderConfig,
    RuntimeWindowConfig,
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    set_runtime_config,
)
from canvasui.runtime.logging import (
    BACKEND_LOGGER_NAMES,
    JsonFormatter,
    configure_logging,
    parse_event_message,
    setup_logging,
    stop_logging,
)

__all__ = [
    "BACKEND_LOGGER_NAMES",
    "JsonFormatter",
    "RuntimeConfig",
    "RuntimeInputConfig",
    "RuntimeRenderConfig",
    "RuntimeWindowConfig",
    "configure_logging",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "parse_event_message",
    "set_runtime_config",
    "setup_logging",
    "stop_logging",
]
