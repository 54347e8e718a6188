"""Bridges between results and pending computations.

Provides:
    - async_result: Await a computation and settle it into a Result (never raises for failures)
    - enforce_async_result: Await a Result and unwrap it back into a value or a raised reason
    - coerce_reason: Turn any rejection value into an exception

The two adapters are inverses. Batch callers wrap each computation with
``async_result`` so that gathering many of them cannot short-circuit on the
first failure, then unwrap individual results where raising is wanted again.

Example:
    >>> async def fetch_all(urls):
    ...     settled = await asyncio.gather(*(async_result(fetch(u)) for u in urls))
    ...     return {u: r for u, r in zip(urls, settled)}
    >>>
    >>> body = await enforce_async_result(async_result(fetch(url)))  # same as await fetch(url)
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from concurrent.futures import Future as ConcurrentFuture
from typing import TypeAlias, TypeVar, Union

from ..core.result import Failure, Outcome, Result, Success
from ..foundation.errors import SettledError
from .observability.logging import get_logger

T = TypeVar("T")

Pending: TypeAlias = Union[Awaitable[T], ConcurrentFuture[T]]

_log = get_logger("results.settle")


def coerce_reason(rejection: object) -> BaseException:
    """Return rejection unchanged if it is an exception, else wrap it in SettledError.

    The new error's message is ``str(rejection)``; the original value is kept
    on ``SettledError.rejection``.
    """
    if isinstance(rejection, BaseException):
        return rejection
    _log.debug("coerced non-exception rejection", rejection_type=type(rejection).__name__)
    return SettledError(str(rejection), rejection=rejection)


async def async_result(pending: Pending[T]) -> Result[T]:
    """Await ``pending`` and settle it into a Result.

    If the computation returns a value, resolves to ``Success(value)``. If it
    raises an ``Exception``, resolves to ``Failure`` holding that same
    exception. A ``concurrent.futures.Future`` that failed with something
    other than an exception resolves to ``Failure(SettledError(str(value)))``.

    Represented failures never propagate. Cancellation does: a cancelled
    computation, or cancellation of the awaiting task, raises
    ``asyncio.CancelledError`` as usual. Only ``Exception`` subclasses are
    captured; any other ``BaseException`` (``KeyboardInterrupt``,
    ``SystemExit``, custom ``BaseException`` subclasses) propagates, even
    though ``result()`` would classify the same object as a failure.

    Args:
        pending: Coroutine, asyncio future/task, or concurrent future

    Returns:
        Success or Failure depending on how the computation settled
    """
    if isinstance(pending, ConcurrentFuture):
        return await _settle_concurrent(pending)
    try:
        value = await pending
    except Exception as e:
        return Failure(e)
    return Success(value)


async def enforce_async_result(pending_result: Pending[Result[T]]) -> T:
    """Await a Result and unwrap it; the inverse of ``async_result``.

    Args:
        pending_result: Computation that produces a Result

    Returns:
        The success value

    Raises:
        BaseException: The failure's reason, unchanged
        TypeError: If the computation did not produce a Result
    """
    if isinstance(pending_result, ConcurrentFuture):
        pending_result = asyncio.wrap_future(pending_result)
    settled = await pending_result
    if not isinstance(settled, Outcome):
        raise TypeError(f"Expected a Result, got {type(settled).__name__}")
    return settled.enforce_value()


async def _settle_concurrent(future: ConcurrentFuture[T]) -> Result[T]:
    """Wait for a concurrent future without copying its state into an asyncio future.

    ``asyncio.wrap_future`` cannot carry a non-exception failure value, so the
    outcome is read straight from the concurrent future once it is done.
    """
    await _wait_done(future)
    if future.cancelled():
        raise asyncio.CancelledError()
    rejection = future.exception()
    if isinstance(rejection, BaseException) and not isinstance(rejection, Exception):
        raise rejection
    if rejection is not None:
        return Failure(coerce_reason(rejection))
    return Success(future.result())


async def _wait_done(future: ConcurrentFuture[T]) -> None:
    loop = asyncio.get_running_loop()
    waiter: asyncio.Future[None] = loop.create_future()

    def _wake(_: ConcurrentFuture[T]) -> None:
        if loop.is_closed():
            return
        loop.call_soon_threadsafe(_resolve, waiter)

    future.add_done_callback(_wake)
    try:
        await waiter
    except asyncio.CancelledError:
        future.cancel()
        raise


def _resolve(waiter: asyncio.Future[None]) -> None:
    if not waiter.done():
        waiter.set_result(None)
