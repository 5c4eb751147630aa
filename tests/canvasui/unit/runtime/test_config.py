from __future__ import annotations

from canvasui.api.logging import LoggingConfig
from canvasui.runtime.config import (
    RuntimeWindowConfig,
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    set_runtime_config,
)


def test_defaults_when_environment_is_empty() -> None:
    config = load_runtime_config(env={})

    assert config.window == RuntimeWindowConfig()
    assert config.render.background == "white"
    assert config.input.trace_enabled is False
    assert config.logging == LoggingConfig()


def test_values_are_read_from_environment() -> None:
    config = load_runtime_config(
        env={
            "CANVASUI_WINDOW_WIDTH": "800",
            "CANVASUI_WINDOW_HEIGHT": " 600 ",
            "CANVASUI_WINDOW_TITLE": "Scene",
            "CANVASUI_WINDOW_MODE": "Maximized",
            "CANVASUI_RENDER_UPDATE_MODE": "on_demand",
            "CANVASUI_RENDER_MAX_FPS": "30",
            "CANVASUI_RENDER_VSYNC": "off",
            "CANVASUI_RENDER_BACKGROUND": "#202020",
            "CANVASUI_INPUT_TRACE_ENABLED": "yes",
            "CANVASUI_LOG_LEVEL": "debug",
            "CANVASUI_LOG_FORMAT": "JSON",
            "CANVASUI_LOG_FILE": "/tmp/canvasui.log",
        }
    )

    assert (config.window.width, config.window.height) == (800, 600)
    assert config.window.title == "Scene"
    assert config.window.window_mode == "maximized"
    assert config.window.update_mode == "ondemand"
    assert config.window.max_fps == 30.0
    assert config.window.vsync is False
    assert config.render.background == "#202020"
    assert config.input.trace_enabled is True
    assert config.logging == LoggingConfig(
        level_name="DEBUG", console_format="json", file_path="/tmp/canvasui.log"
    )


def test_bad_values_fall_back_to_defaults() -> None:
    config = load_runtime_config(
        env={
            "CANVASUI_WINDOW_WIDTH": "wide",
            "CANVASUI_WINDOW_HEIGHT": "-10",
            "CANVASUI_WINDOW_MODE": "floating",
            "CANVASUI_RENDER_UPDATE_MODE": "sometimes",
            "CANVASUI_RENDER_MAX_FPS": "0",
            "CANVASUI_RENDER_VSYNC": "maybe",
            "CANVASUI_LOG_LEVEL": "LOUD",
            "CANVASUI_LOG_FORMAT": "xml",
            "CANVASUI_LOG_FILE": "   ",
        }
    )

    assert config.window.width == 1200
    assert config.window.height == 1
    assert config.window.window_mode == "windowed"
    assert config.window.update_mode == "ondemand"
    assert config.window.max_fps == 1.0
    assert config.window.vsync is True
    assert config.logging.level_name == "INFO"
    assert config.logging.console_format == "text"
    assert config.logging.file_path is None


def test_backend_log_level_is_read_and_validated() -> None:
    assert load_runtime_config(env={}).logging.backend_level_name == "WARNING"
    config = load_runtime_config(env={"CANVASUI_BACKEND_LOG_LEVEL": "debug"})
    assert config.logging.backend_level_name == "DEBUG"
    config = load_runtime_config(env={"CANVASUI_BACKEND_LOG_LEVEL": "chatty"})
    assert config.logging.backend_level_name == "WARNING"


def test_generic_log_level_is_a_fallback() -> None:
    assert load_runtime_config(env={"LOG_LEVEL": "warning"}).logging.level_name == "WARNING"
    config = load_runtime_config(env={"LOG_LEVEL": "warning", "CANVASUI_LOG_LEVEL": "error"})
    assert config.logging.level_name == "ERROR"


def test_process_environment_is_used_by_default(monkeypatch) -> None:
    monkeypatch.setenv("CANVASUI_WINDOW_TITLE", "From env")

    assert initialize_runtime_config().window.title == "From env"
    assert get_runtime_config().window.title == "From env"


def test_set_runtime_config_replaces_current() -> None:
    config = load_runtime_config(env={"CANVASUI_WINDOW_TITLE": "Pinned"})

    assert set_runtime_config(config) is config
    assert get_runtime_config() is config
