"""Logging and profiling for the editor, built on telelog.

The editor owns the terminal, so telelog never writes to the console
unless ``MUKS_LOG_CONSOLE`` is set; without ``MUKS_LOG_FILE`` (or
``--log-file``) records are produced but go nowhere.

``configure(level=..., log_file=...)`` -- rebuild the active configuration
``get_logger(name)`` -- cached ``telelog.Logger`` per name
``record_event(name, ...)`` -- one structured ``event::<name>`` record
``span(name, ...)`` -- profile a block, optionally as a tracked component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MUKS_"
DEFAULT_LOGGER_NAME = "muks"
DEFAULT_LEVEL = "INFO"

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def build_config(
    *, level: Optional[str] = None, log_file: Optional[str] = None
) -> Any:
    """Arguments win over ``MUKS_LOG_LEVEL`` / ``MUKS_LOG_FILE``."""

    config = tl.Config()
    config.with_min_level((level or _env("LOG_LEVEL") or DEFAULT_LEVEL).upper())

    console = _env_flag("LOG_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)

    target = log_file or _env("LOG_FILE")
    if target:
        config.with_file_output(target)

    config.with_profiling(True)
    return config


def configure(
    *, level: Optional[str] = None, log_file: Optional[str] = None
) -> None:
    """Swap in a new configuration; loggers are rebuilt on next use."""

    global _CONFIG
    _CONFIG = build_config(level=level, log_file=log_file)
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = build_config()
    logger_name = name or DEFAULT_LOGGER_NAME
    log = _LOGGERS.get(logger_name)
    if log is None:
        log = _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return log


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    """Prefer telelog's ``<level>_with`` pair API; fall back to a flat line."""

    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(payload))
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(" | ".join([message] + [f"{k}={v}" for k, v in _pairs(payload)]))


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(
        get_logger(logger_name),
        level,
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    """Yielded by ``span``; metadata added here is reported if the block fails."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            payload["component"] = self.component
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block with ``logger.profile``.

    ``component=True`` tracks the block as component ``name``; a string
    names the component. ``metadata`` is set as logger context for the
    duration of the block. Exceptions are logged as ``span::fail`` and
    re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(logger=log, name=name, component=component_name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)

    with ExitStack() as stack:
        for key, value in handle.metadata.items():
            log.add_context(key, value)
        stack.callback(_drop_context, log, list(handle.metadata))
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


def _drop_context(log: Any, keys: List[str]) -> None:
    for key in keys:
        log.remove_context(key)


__all__ = [
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
