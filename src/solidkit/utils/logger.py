# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Logging utilities for solidkit.

Demonstration transcripts go to stdout through ``print``; diagnostic events
(dispatches, saves, payments) go through the loggers configured here.  Only
the standard library is used.  JSON output accepts any serializer so callers
can plug in ``orjson`` or similar without adding a dependency.
"""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
import os
from typing import Any, ClassVar, Final


RESET: Final[str] = "\033[0m"

DEBUG_COLOR: Final[str] = "\033[36m"
INFO_COLOR: Final[str] = "\033[32m"
WARNING_COLOR: Final[str] = "\033[33m"
ERROR_COLOR: Final[str] = "\033[1;31m"
CRITICAL_COLOR: Final[str] = "\033[1;35m"
LOGGER_COLOR: Final[str] = "\033[94m"

DEFAULT_LOGGER_NAME: Final[str] = "solidkit"
ENV_LOG_LEVEL: Final[str] = "SOLIDKIT_LOG_LEVEL"
ENV_LOG_JSON: Final[str] = "SOLIDKIT_LOG_JSON"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"

JsonSerializer = Callable[[dict[str, Any]], str]
PayloadTransformer = Callable[[dict[str, Any]], dict[str, Any]]

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime", "context", "duration_ms"}


def _duration_suffix(record: logging.LogRecord) -> str:
    duration = getattr(record, "duration_ms", None)
    if isinstance(duration, (int, float)):
        return f" [{duration:.2f} ms]"
    return ""


class PlainFormatter(logging.Formatter):
    """Text formatter that appends ``[<n> ms]`` when a record has a duration."""

    def format(self, record: logging.LogRecord) -> str:
        return super().format(record) + _duration_suffix(record)


class ColoredFormatter(PlainFormatter):
    """ANSI-colored variant of :class:`PlainFormatter`.

    Override ``LEVEL_COLORS`` in a subclass to change the palette.
    """

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": DEBUG_COLOR,
        "INFO": INFO_COLOR,
        "WARNING": WARNING_COLOR,
        "ERROR": ERROR_COLOR,
        "CRITICAL": CRITICAL_COLOR,
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname, name = record.levelname, record.name
        record.levelname = f"{self.LEVEL_COLORS.get(levelname, '')}{levelname}{RESET}"
        record.name = f"{LOGGER_COLOR}{name}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname, record.name = levelname, name


class SolidKitHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker handler so :func:`setup_logger` can find what it installed."""


class StructuredJSONFormatter(logging.Formatter):
    """Serialize log records into one JSON object per line."""

    def __init__(
        self,
        serializer: JsonSerializer,
        *,
        datefmt: str | None = None,
        payload_transformer: PayloadTransformer | None = None,
    ) -> None:
        super().__init__(datefmt=datefmt)
        self._serializer = serializer
        self._transformer = payload_transformer or (lambda payload: payload)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        duration = getattr(record, "duration_ms", None)
        if duration is not None:
            payload["duration_ms"] = duration
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        context: dict[str, Any] = {}
        supplied = getattr(record, "context", None)
        if isinstance(supplied, dict):
            context.update(supplied)
        for key, value in record.__dict__.items():
            if key not in _RECORD_KEYS and key not in context:
                context[key] = value
        if context:
            payload["context"] = context

        return self._serializer(self._transformer(payload))


def _default_json_serializer(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, default=str)


def _has_solidkit_handler(root: logging.Logger) -> bool:
    return any(isinstance(handler, SolidKitHandler) for handler in root.handlers)


def _read_bool_env(key: str) -> bool:
    value = os.getenv(key)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL) or logging.WARNING
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logger(
    *,
    level: int | str | None = None,
    use_json: bool | None = None,
    use_color: bool | None = None,
    json_serializer: JsonSerializer | None = None,
    payload_transformer: PayloadTransformer | None = None,
    fmt: str | None = None,
    datefmt: str | None = DEFAULT_DATEFMT,
    force: bool = False,
) -> None:
    """Configure the root logger.

    Args:
        level: Log level. Falls back to ``SOLIDKIT_LOG_LEVEL`` then
            ``logging.WARNING`` so demo transcripts stay uncluttered.
        use_json: Emit JSON lines. Defaults to ``SOLIDKIT_LOG_JSON``.
        use_color: Colorize text output. Defaults to on unless ``NO_COLOR``
            is set or JSON output is selected.
        json_serializer: Converts the payload dict into a string.
        payload_transformer: Rewrites the payload before serialization.
        fmt: Format string for text output.
        datefmt: Date format for all output.
        force: Replace a handler installed by an earlier call.
    """
    root = logging.getLogger()

    if _has_solidkit_handler(root):
        if not force:
            return
        for handler in [h for h in root.handlers if isinstance(h, SolidKitHandler)]:
            root.removeHandler(handler)
            handler.close()

    resolved_level = _resolve_level(level)
    root.setLevel(resolved_level)

    resolved_use_json = use_json if use_json is not None else _read_bool_env(ENV_LOG_JSON)
    if use_color is not None:
        resolved_use_color = use_color
    elif os.getenv(ENV_NO_COLOR):
        resolved_use_color = False
    else:
        resolved_use_color = not resolved_use_json

    formatter: logging.Formatter
    if resolved_use_json:
        formatter = StructuredJSONFormatter(
            json_serializer or _default_json_serializer,
            datefmt=datefmt,
            payload_transformer=payload_transformer,
        )
    elif resolved_use_color:
        formatter = ColoredFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)
    else:
        formatter = PlainFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)

    handler = SolidKitHandler()
    handler.setLevel(resolved_level)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger, configuring logging on first use."""
    if not _has_solidkit_handler(logging.getLogger()):
        setup_logger()
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "ColoredFormatter",
    "PlainFormatter",
    "SolidKitHandler",
    "StructuredJSONFormatter",
    "get_logger",
    "setup_logger",
]
