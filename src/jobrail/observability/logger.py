"""Structured logging for jobrail.

Its main job is the debug trail of composed lookups: each step of a chain
logs, so the output shows where a chain stopped. With JOBRAIL_DEBUG=true,
`python -m jobrail` prints (timestamps omitted)

    [debug] searching for job job_id="1" logger="jobrail.service"
    [debug] job found company="Google" job_id="1" logger="jobrail.service"
    [debug] searching for job job_id="42" logger="jobrail.service"

and no "job found" line for job 42.
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Callable, Protocol, TextIO

from jobrail.errors import JsonDict, JsonValue

if TYPE_CHECKING:
    from jobrail.config import LoggingSettings


@dataclass(slots=True)
class LogEntry:
    timestamp: float
    level: str
    event: str
    context: JsonDict


class LogRenderer(Protocol):
    def render(self, entry: LogEntry) -> None: ...


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


_ANSI = {"debug": "\033[2m", "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}
_RESET = "\033[0m"


def _console_value(v: object) -> str:
    match v:
        case str(): return f'"{v}"'
        case bool(): return str(v).lower()
        case _: return str(v)


@dataclass(slots=True)
class ConsoleRenderer:
    """One line per entry: [time] [level] event key=value ..., keys sorted."""
    
    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = color only on a tty
    show_timestamp: bool = True
    
    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = bool(getattr(self.output, "isatty", lambda: False)())
    
    def render(self, entry: LogEntry) -> None:
        level = f"[{entry.level}]"
        if self.colors:
            level = f"{_ANSI.get(entry.level, '')}{level}{_RESET}"
        head = [level, entry.event]
        if self.show_timestamp:
            head.insert(0, datetime.fromtimestamp(entry.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3])
        pairs = [f"{k}={_console_value(v)}" for k, v in sorted(entry.context.items())]
        print(" ".join(head + pairs), file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines, one object per entry."""
    
    output: TextIO = field(default_factory=lambda: sys.stdout)
    
    def render(self, entry: LogEntry) -> None:
        import orjson
        record = {
            "timestamp": datetime.fromtimestamp(entry.timestamp, tz=UTC).isoformat(),
            "level": entry.level,
            "event": entry.event,
            **entry.context,
        }
        print(orjson.dumps(record, default=str).decode(), file=self.output)


class NoOpRenderer:
    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("jobrail_log_renderer", default=None)
_level: ContextVar[int] = ContextVar("jobrail_log_level", default=logging.INFO)

_RENDERERS: dict[str, Callable[[TextIO | None, bool | None], LogRenderer]] = {
    "console": lambda out, colors: ConsoleRenderer(output=out or sys.stderr, colors=colors),
    "json": lambda out, colors: JsonRenderer(output=out or sys.stdout),
    "none": lambda out, colors: NoOpRenderer(),
}


def configure_logging(
    format: str = "console",  # noqa: A002 - matches the settings field name
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Install the global renderer and minimum level. Raises ValueError on an unknown format."""
    try:
        factory = _RENDERERS[format]
    except KeyError:
        raise ValueError(f"Unknown format: {format}. Use one of {', '.join(_RENDERERS)}") from None
    renderer = factory(output, colors)
    _renderer.set(renderer)
    _level.set(getattr(logging, level.upper(), logging.INFO))
    return renderer


def configure_from_settings(settings: LoggingSettings, *, level: str | None = None) -> LogRenderer:
    """configure_logging() from LoggingSettings; level overrides settings.level."""
    return configure_logging(settings.format, level or settings.level, colors=settings.colors)



# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class BoundLogger:
    """Logger carrying key-value context added to every entry.
    
    The renderer and minimum level are looked up per call, so loggers created
    at import time follow a later configure_logging(). Pass renderer/level to
    pin them instead.
    """
    
    context: JsonDict = field(default_factory=dict)
    renderer: LogRenderer | None = None
    level: int | None = None
    
    def bind(self, **kw: JsonValue) -> BoundLogger:
        """New logger with kw merged into the context."""
        return BoundLogger({**self.context, **kw}, self.renderer, self.level)
    
    def _emit(self, level: int, event: str, kw: JsonDict) -> None:
        threshold = _level.get() if self.level is None else self.level
        if level < threshold:
            return
        renderer = self.renderer or _renderer.get()
        if renderer is None:
            renderer = ConsoleRenderer()
            _renderer.set(renderer)
        renderer.render(LogEntry(time.time(), logging.getLevelName(level).lower(), event, {**self.context, **kw}))
    
    def debug(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.DEBUG, event, kw)
    
    def info(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.INFO, event, kw)
    
    def warning(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.WARNING, event, kw)
    
    def error(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.ERROR, event, kw)


def get_logger(name: str | None = None, **context: JsonValue) -> BoundLogger:
    """Logger whose context holds name as 'logger' plus any extra context."""
    return BoundLogger({**context, **({"logger": name} if name else {})})
