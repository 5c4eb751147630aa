"""Centralized runtime configuration read from ``CANVASUI_*`` environment variables."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from canvasui.api.logging import LoggingConfig

UPDATE_MODES: frozenset[str] = frozenset({"manual", "ondemand", "continuous", "fastest"})
WINDOW_MODES: frozenset[str] = frozenset({"windowed", "maximized", "fullscreen", "borderless"})
LOG_FORMATS: frozenset[str] = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class RuntimeWindowConfig:
    width: int = 1200
    height: int = 720
    title: str = "canvasui"
    window_mode: str = "windowed"
    update_mode: str = "ondemand"
    max_fps: float = 60.0
    vsync: bool = True


@dataclass(frozen=True, slots=True)
class RuntimeRenderConfig:
    background: str = "white"


@dataclass(frozen=True, slots=True)
class RuntimeInputConfig:
    trace_enabled: bool = False


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    window: RuntimeWindowConfig
    render: RuntimeRenderConfig
    input: RuntimeInputConfig
    logging: LoggingConfig


_RUNTIME_CONFIG: ContextVar[RuntimeConfig | None] = ContextVar(
    "canvasui_runtime_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _choice(
    name: str,
    default: str,
    choices: frozenset[str],
    *,
    env: Mapping[str, str] | None = None,
) -> str:
    value = _text(name, default, env=env).lower().replace("-", "_")
    if value == "on_demand":
        value = "ondemand"
    return value if value in choices else str(default)


_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _log_level(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    value = _text(name, default, env=env).upper()
    return value if value in _LOG_LEVELS else default


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    defaults = RuntimeWindowConfig()
    file_path = _text("CANVASUI_LOG_FILE", "", env=env)
    return RuntimeConfig(
        window=RuntimeWindowConfig(
            width=_int("CANVASUI_WINDOW_WIDTH", defaults.width, minimum=1, env=env),
            height=_int("CANVASUI_WINDOW_HEIGHT", defaults.height, minimum=1, env=env),
            title=_text("CANVASUI_WINDOW_TITLE", defaults.title, env=env),
            window_mode=_choice(
                "CANVASUI_WINDOW_MODE", defaults.window_mode, WINDOW_MODES, env=env
            ),
            update_mode=_choice(
                "CANVASUI_RENDER_UPDATE_MODE", defaults.update_mode, UPDATE_MODES, env=env
            ),
            max_fps=_float("CANVASUI_RENDER_MAX_FPS", defaults.max_fps, minimum=1.0, env=env),
            vsync=_flag("CANVASUI_RENDER_VSYNC", defaults.vsync, env=env),
        ),
        render=RuntimeRenderConfig(
            background=_text("CANVASUI_RENDER_BACKGROUND", "white", env=env),
        ),
        input=RuntimeInputConfig(
            trace_enabled=_flag("CANVASUI_INPUT_TRACE_ENABLED", False, env=env),
        ),
        logging=LoggingConfig(
            level_name=_log_level(
                "CANVASUI_LOG_LEVEL", _log_level("LOG_LEVEL", "INFO", env=env), env=env
            ),
            console_format=_choice("CANVASUI_LOG_FORMAT", "text", LOG_FORMATS, env=env),
            file_path=file_path or None,
            file_format="json",
            backend_level_name=_log_level("CANVASUI_BACKEND_LOG_LEVEL", "WARNING", env=env),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: RuntimeConfig) -> RuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> RuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "RuntimeConfig",
    "RuntimeInputConfig",
    "RuntimeRenderConfig",
    "RuntimeWindowConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "set_runtime_config",
]
