"""results - Runtime result values for settled operations.

A result holds either a success value or the exception an operation failed
with. Batch operations return collections of results so that per-item
outcomes are reported without raising and without discarding error detail.

Quick Start:
    >>> from results import result, Success, Failure
    >>>
    >>> def parse_all(rows: list[str]) -> list[Result[int]]:
    ...     out = []
    ...     for row in rows:
    ...         try:
    ...             out.append(result(int(row)))
    ...         except ValueError as e:
    ...             out.append(result(e))
    ...     return out
    >>>
    >>> settled = parse_all(["1", "x", "3"])
    >>> [r.ok for r in settled]
    [True, False, True]
    >>> settled[1].enforce_value()
    Traceback (most recent call last):
    ...
    ValueError: invalid literal for int() with base 10: 'x'

Async Computations:
    >>> from results import async_result, enforce_async_result
    >>>
    >>> settled = await asyncio.gather(*(async_result(fetch(u)) for u in urls))  # never raises
    >>> body = await enforce_async_result(async_result(fetch(url)))  # same as await fetch(url)

Serialization (settle-all records):
    >>> from results.io import dumps
    >>> dumps(result())
    b'{"status":"fulfilled"}'

Pattern Matching:
    >>> match result(42):
    ...     case Success(value):
    ...         print(value)
    ...     case Failure(reason):
    ...         print(f"failed: {reason}")
    42
"""

from __future__ import annotations

__version__ = "1.0.0"

# Core
from .core import Failure, Outcome, Result, ResultStatus, Success, result

# Errors
from .foundation.errors import ResultContractError, ResultDecodeError, ResultsError, SettledError

# Settings
from .foundation.config import ResultsSettings, clear_settings_cache, get_settings

# Async adapters
from .runtime import Pending, async_result, coerce_reason, enforce_async_result

# Logging
from .runtime.observability import configure_logging, get_logger

# Serialization
from .io import dumps, dumps_str, loads, loads_result, pack, revive, unpack, unpack_result

__all__ = [
    "__version__",
    # Core
    "Result", "Outcome", "Success", "Failure", "ResultStatus", "result",
    # Errors
    "ResultsError", "ResultContractError", "SettledError", "ResultDecodeError",
    # Settings
    "ResultsSettings", "get_settings", "clear_settings_cache",
    # Async adapters
    "Pending", "async_result", "enforce_async_result", "coerce_reason",
    # Logging
    "configure_logging", "get_logger",
    # Serialization
    "dumps", "dumps_str", "loads", "loads_result", "pack", "unpack", "unpack_result", "revive",
]
