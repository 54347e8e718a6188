"""Exceptions raised by the results package.

Represented failures are values (``Failure``), not exceptions. The classes
here cover the cases where something is actually raised: contract violations,
reasons synthesized from non-exception rejections, and bad serialized input.
"""

from __future__ import annotations


class ResultsError(Exception):
    """Base class for exceptions raised by this package."""


class ResultContractError(ResultsError, TypeError):
    """A result was used against its contract (e.g. enforce_error() on a success).

    Signals programmer error. Not a recoverable condition.
    """


class SettledError(ResultsError):
    """Failure reason synthesized from something that was not an exception.

    Created when a computation rejects with a plain value, or when a failure
    is revived from its serialized record.

    Attributes:
        message: Human-readable message (``str()`` of the rejection)
        name: Name of the original error type, if revived from a record
        rejection: The original non-exception value, if any
    """

    def __init__(self, message: str, *, name: str | None = None, rejection: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.name = name or type(self).__name__
        self.rejection = rejection

    def __repr__(self) -> str:
        if self.name != type(self).__name__:
            return f"{type(self).__name__}({self.message!r}, name={self.name!r})"
        return f"{type(self).__name__}({self.message!r})"


class ResultDecodeError(ResultsError, ValueError):
    """A serialized result record could not be decoded or validated."""
