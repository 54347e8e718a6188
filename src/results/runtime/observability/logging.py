"""Structured logging with context propagation.

Provides context-aware structured logging:
- Bound key-value context on immutable loggers
- Human-readable console output, JSON Lines (orjson) for production
- Scoped context that persists across async calls

Quick Start:
    >>> from results.runtime.observability import get_logger, configure_logging
    >>>
    >>> # Configure (once at startup)
    >>> configure_logging(format="console", level="DEBUG")  # or "json" for production
    >>>
    >>> log = get_logger("batch-import")
    >>> log.info("row settled", row=12, status="rejected")

The default level and format come from ``RESULTS_LOG_LEVEL`` and
``RESULTS_LOG_FORMAT`` (see ``results.foundation.config``).
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

import orjson

from results.foundation.config import get_settings

if TYPE_CHECKING:
    from types import TracebackType

    from results.foundation.errors import JsonDict, JsonValue

# Context var for bound context (persists across async calls)
_log_context: ContextVar[JsonDict] = ContextVar("log_context", default={})


# ─────────────────────────────────────────────────────────────────────────────
# Core Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context.

    Binds key-value pairs that appear in every log entry.
    Immutable - bind() returns a new logger with merged context.

    A logger without an explicit level follows the globally configured one,
    so module-level loggers created at import time honour later configuration.

    Example:
        >>> log = BoundLogger(context={"logger": "results.settle"})
        >>> log.warning("coerced rejection", rejection_type="str")
        # => 10:30:45.123 [warning] coerced rejection logger="results.settle" rejection_type="str"
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int | None = None

    def bind(self, **kw: JsonValue) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer, _level=self._level)

    def unbind(self, *keys: str) -> BoundLogger:
        """Create new logger without specified keys."""
        return BoundLogger(
            context={k: v for k, v in self.context.items() if k not in keys},
            _renderer=self._renderer,
            _level=self._level,
        )

    def is_enabled_for(self, level: int) -> bool:
        return level >= (self._level if self._level is not None else _get_level())

    def _log(self, level: int, event: str, **kw: JsonValue) -> None:
        if not self.is_enabled_for(level):
            return
        # Merge contexts: scoped -> bound -> call-site
        merged = {**_log_context.get(), **self.context, **kw}
        entry = LogEntry(timestamp=time.time(), level=_level_name(level), event=event, context=merged)
        (self._renderer or _get_renderer()).render(entry)

    def debug(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.DEBUG, event, **kw)

    def info(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.INFO, event, **kw)

    def warning(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.WARNING, event, **kw)

    def error(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """Log error with exception info."""
        import traceback
        kw["exc_info"] = traceback.format_exc()
        self._log(logging.ERROR, event, **kw)


@dataclass(slots=True)
class LogEntry:
    """Log entry with all context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        """ISO formatted timestamp."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """Human-readable timestamp (HH:MM:SS.mmm)."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable console output.

    Format: timestamp [level] event key=value key2=value2
    """

    output: TextIO = field(default_factory=lambda: sys.stderr)
    show_timestamp: bool = True

    def render(self, entry: LogEntry) -> None:
        parts: list[str] = []
        if self.show_timestamp:
            parts.append(entry.ts_human)
        parts.append(f"[{entry.level}]")
        parts.append(entry.event)
        for k, v in sorted(entry.context.items()):
            if k == "exc_info":
                continue
            parts.append(f"{k}={_format_value(v)}")
        print(" ".join(parts), file=self.output)
        if "exc_info" in entry.context:
            print(entry.context["exc_info"], file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation.

    Each entry is a single JSON object on its own line.
    """

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        data = {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event, **entry.context}
        print(orjson.dumps(data, default=str).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("log_renderer", default=None)
_default_level: ContextVar[int | None] = ContextVar("log_level", default=None)


def configure_logging(
    format: str = "console",  # noqa: A002 - shadows builtin but matches stdlib
    level: str = "WARNING",
    *,
    output: TextIO | None = None,
) -> LogRenderer:
    """Configure global structured logging.

    Args:
        format: Output format - "console" (human), "json" (machine), "none"
        level: Minimum log level - DEBUG, INFO, WARNING, ERROR, CRITICAL
        output: Output stream (default: stderr for console, stdout for json)

    Returns:
        Configured renderer instance
    """
    renderer: LogRenderer
    if format == "console":
        renderer = ConsoleRenderer(output=output or sys.stderr)
    elif format == "json":
        renderer = JsonRenderer(output=output or sys.stdout)
    elif format == "none":
        renderer = NoOpRenderer()
    else:
        raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")

    _default_level.set(getattr(logging, level.upper(), logging.WARNING))
    _renderer.set(renderer)
    return renderer


def configure_from_settings(*, output: TextIO | None = None) -> LogRenderer:
    """Configure logging from ``RESULTS_LOG_*`` settings."""
    settings = get_settings()
    return configure_logging(settings.logging.format, settings.effective_log_level, output=output)


def reset_logging() -> None:
    """Drop configured renderer and level; the next emit falls back to settings."""
    _renderer.set(None)
    _default_level.set(None)


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Get a structured logger with optional initial context.

    Args:
        name: Logger name (added to context as 'logger')
        **initial_context: Initial bound key-value pairs

    Example:
        >>> log = get_logger("results.codec", codec="orjson")
    """
    ctx = dict(initial_context)
    if name:
        ctx["logger"] = name
    return BoundLogger(context=ctx)


def _get_level() -> int:
    level = _default_level.get()
    if level is None:
        level = getattr(logging, get_settings().effective_log_level, logging.WARNING)
    return level


def _get_renderer() -> LogRenderer:
    """Get configured renderer or create one from settings."""
    renderer = _renderer.get()
    if renderer is None:
        fmt = get_settings().logging.format
        renderer = JsonRenderer() if fmt == "json" else NoOpRenderer() if fmt == "none" else ConsoleRenderer()
        _renderer.set(renderer)
    return renderer


class log_context:
    """Context manager for scoped logging context.

    Adds key-value pairs to all log entries within the scope.

    Example:
        >>> with log_context(batch_id="b-17"):
        ...     log.info("settled")  # includes batch_id
        >>> log.info("done")  # no longer includes it
    """

    __slots__ = ("_ctx", "_token")

    def __init__(self, **kw: JsonValue) -> None:
        self._ctx: JsonDict = dict(kw)
        self._token: object | None = None

    def __enter__(self) -> log_context:
        current = _log_context.get()
        self._token = _log_context.set({**current, **self._ctx})
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _log_context.reset(self._token)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def _level_name(level: int) -> str:
    """Convert logging level int to lowercase name."""
    return logging.getLevelName(level).lower()


def _format_value(v: object) -> str:
    """Format a value for console output."""
    if isinstance(v, str):
        return f'"{v}"'
    if isinstance(v, bool):
        return str(v).lower()
    if isinstance(v, (int, float)):
        return str(v)
    if isinstance(v, dict):
        return f"{{{len(v)} items}}"
    if isinstance(v, (list, tuple)):
        return f"[{len(v)} items]"
    return repr(v)
