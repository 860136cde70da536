"""Telemetry services for the formatting engine, backed by telelog.

The rest of the package only touches four names:

``configure(...)`` -- adopt an explicit telelog config or a named preset
``get_logger(name)`` -- cached logger bound to the active config
``record_event(name, ...)`` -- structured event at a chosen level
``span(name, ...)`` -- profiled block, optionally tracked as a component

Settings come from ``MARKDOWN_ENGINE_*`` environment variables and are read
once per ``configure()`` call.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MARKDOWN_ENGINE_"
PRESETS = ("development", "production", "performance")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_ACTIVE_SETTINGS: Optional["TelemetrySettings"] = None


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Environment-derived knobs for the default telelog config."""

    logger_name: str = "markdown_engine"
    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False
    buffered: bool = False
    buffer_size: int = 2048
    console: bool = True
    colored: bool = True

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        return cls(
            logger_name=_env("LOGGER") or "markdown_engine",
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            log_file=_env("LOG_FILE") or "",
            json_format=_env_flag("LOG_JSON", False),
            buffered=_env_flag("LOG_BUFFERED", False),
            buffer_size=int(_env("LOG_BUFFER_SIZE") or "2048"),
            console=not _env_flag("DISABLE_CONSOLE", False),
            colored=not _env_flag("NO_COLOR", False),
        )


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return repr(value)
    return str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _with_profiling(config: Any) -> Any:
    # Spans rely on logger.profile(); keep it on for every config we adopt.
    config.with_profiling(True)
    return config


def _preset_config(preset: str, settings: TelemetrySettings) -> Any:
    key = preset.lower()
    if key == "performance_analysis":
        key = "performance"
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'.")

    config = tl.Config()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(settings.log_file or "markdown_engine.log")
        config.with_buffering(True)
    else:
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_json_format(True)
        config.with_buffering(True)
        config.with_file_output(
            settings.log_file or "markdown_engine-performance.log"
        )
    return _with_profiling(config)


def _default_config(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json_format:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    return _with_profiling(config)


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``telelog.Config`` to adopt as-is (profiling is forced on).
    preset:
        One of ``"development"``, ``"production"`` or ``"performance"``.
        Mutually exclusive with ``config``.

    Environment settings are read here once; cached loggers are dropped so
    the next ``get_logger`` picks up the change.
    """

    global _ACTIVE_CONFIG, _ACTIVE_SETTINGS
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    settings = TelemetrySettings.from_env()
    if preset:
        _ACTIVE_CONFIG = _preset_config(preset, settings)
    elif config is not None:
        _ACTIVE_CONFIG = _with_profiling(config)
    else:
        _ACTIVE_CONFIG = _default_config(settings)
    _ACTIVE_SETTINGS = settings
    _LOGGER_CACHE.clear()


def _ensure_config() -> Any:
    if _ACTIVE_CONFIG is None:
        configure()
    return _ACTIVE_CONFIG


def active_settings() -> TelemetrySettings:
    """Settings read by the last ``configure()`` call."""

    _ensure_config()
    assert _ACTIVE_SETTINGS is not None
    return _ACTIVE_SETTINGS


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name`` (engine logger by default)."""

    config = _ensure_config()
    logger_name = name or active_settings().logger_name
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, config)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span``; lets the block attach metadata or report failure."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        for key, value in (extra or {}).items():
            payload[key] = _stringify(value)
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))

    def cancel(self, reason: str | None = None) -> None:
        extra = {"reason": reason} if reason else None
        _emit(self.logger, "warning", "span::cancel", self._payload(extra))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block of engine work.

    ``component=True`` tracks the block under ``name``; a string tracks it
    under that component id. ``metadata`` is pushed as transient logger
    context for the duration of the block and copied onto the handle.
    Exceptions are reported through ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    if component is True:
        component_name: Optional[str] = name
    elif isinstance(component, str):
        component_name = component
    else:
        component_name = None

    context: Dict[str, str] = {
        key: _stringify(value) for key, value in (metadata or {}).items()
    }
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(context),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc) or type(exc).__name__)
            raise
        finally:
            for key in context:
                log.remove_context(key)


configure()
logger = get_logger()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetrySettings",
    "active_settings",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
