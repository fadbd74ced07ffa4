"""telelog setup for clean-indent.

Everything else in the package goes through four calls: ``configure``,
``get_logger``, ``record_event`` and ``span``. Settings come from
``CLEAN_INDENT_*`` environment variables unless a preset is chosen.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CLEAN_INDENT_"
ROOT_LOGGER = "clean_indent"
PRESETS = ("development", "production")

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name, default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level((env("LOG_LEVEL") or "INFO").upper())

    console = not env_flag("DISABLE_CONSOLE", False)
    config.with_console_output(console)
    if console:
        config.with_colored_output(not env_flag("NO_COLOR", False))
    if env_flag("LOG_JSON", False):
        config.with_json_format(True)
    if env("LOG_FILE"):
        config.with_file_output(env("LOG_FILE"))
    if env_flag("LOG_BUFFERED", False):
        config.with_buffering(True)
        config.with_buffer_size(int(env("LOG_BUFFER_SIZE") or "2048"))

    config.with_profiling(True)
    return config


def _config_from_preset(preset: str) -> Any:
    config = tl.Config()
    if preset == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif preset == "production":
        # the Textual demo owns the terminal, so production logs go to a file
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(env("LOG_FILE") or "clean_indent.log")
        config.with_buffering(True)
    else:
        raise ValueError(f"Unknown preset '{preset}', expected one of {PRESETS}")
    config.with_profiling(True)
    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Rebuild the telelog configuration and drop cached loggers."""

    global _config
    _config = _config_from_preset(preset) if preset else _config_from_env()
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    key = name or ROOT_LOGGER
    if key not in _loggers:
        if _config is None:
            configure()
        _loggers[key] = tl.Logger.with_config(key, _config)
    return _loggers[key]


def _emit(log: Any, level: str, message: str, pairs: Dict[str, Any]) -> None:
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in pairs.items()])
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {pairs}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(
        get_logger(logger_name),
        level.lower(),
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Profile the block under ``name``; ``metadata`` rides along as log context.

    An exception escaping the block is logged at error level and re-raised.
    """

    log = get_logger(logger_name)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)
    try:
        with log.profile(name):
            yield
    except Exception as exc:
        _emit(log, "error", "span::error", {"span": name, "reason": str(exc), **context})
        raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "ENV_PREFIX",
    "PRESETS",
    "configure",
    "env",
    "env_flag",
    "get_logger",
    "record_event",
    "span",
]
