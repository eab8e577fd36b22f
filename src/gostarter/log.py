"""Leveled terminal output for gostarter, rendered with Rich.

The level comes from ``--log-level`` or ``GOSTARTER_LOG_LEVEL`` (default
``info``). Messages at ``warning`` and above go to stderr. Colour is off when
``--no-color``, ``NO_COLOR`` or ``GOSTARTER_NO_COLOR`` is set.
"""

from __future__ import annotations

import os
import sys
from enum import IntEnum

from rich.console import Console
from rich.text import Text

ENV_LOG_LEVEL = "GOSTARTER_LOG_LEVEL"
ENV_NO_COLOR = "GOSTARTER_NO_COLOR"


class LogLevel(IntEnum):
    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


_STYLES: dict[LogLevel, str] = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "cyan",
    LogLevel.INFO: "",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}
LEVEL_NAMES = tuple(level.name.lower() for level in LogLevel)
_ALIASES = {"warn": LogLevel.WARNING}

_level: LogLevel | None = None
_force_no_color = False


def parse_level(value: str | None, *, fallback: LogLevel = LogLevel.INFO) -> LogLevel:
    """Map a level name to a ``LogLevel``; unknown or empty names fall back.

    Example:
        >>> parse_level("Debug")
        <LogLevel.DEBUG: 20>
        >>> parse_level("loud")
        <LogLevel.INFO: 30>
    """
    name = (value or "").strip().lower()
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return LogLevel[name.upper()] if name else fallback
    except KeyError:
        return fallback


def configured_level() -> LogLevel:
    global _level
    if _level is None:
        _level = parse_level(os.environ.get(ENV_LOG_LEVEL))
    return _level


def set_level(value: str | None) -> None:
    global _level
    _level = parse_level(value)


def set_no_color(value: bool) -> None:
    """Force colour off for the rest of the process (``False`` defers to env)."""
    global _force_no_color
    _force_no_color = value


def no_color() -> bool:
    return _force_no_color or bool(os.environ.get("NO_COLOR") or os.environ.get(ENV_NO_COLOR))


def console(*, stderr: bool = False) -> Console:
    """Return a Rich console bound to the current stdout or stderr."""
    return Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=no_color(),
    )


def emit(level: LogLevel, message: str, *, style: str | None = None) -> None:
    if level < configured_level():
        return
    text = Text(message, style=_STYLES[level] if style is None else style)
    console(stderr=level >= LogLevel.WARNING).print(text)


def trace(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.TRACE, message, style=style)


def debug(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.DEBUG, message, style=style)


def info(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.INFO, message, style=style)


def success(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.SUCCESS, message, style=style)


def warning(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.WARNING, message, style=style)


def error(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.ERROR, message, style=style)
