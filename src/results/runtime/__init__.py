"""Runtime: adapters between results and pending computations, plus logging."""

from .settle import Pending, async_result, coerce_reason, enforce_async_result

__all__ = ["Pending", "async_result", "enforce_async_result", "coerce_reason"]
