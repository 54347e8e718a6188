"""Result variant type for representing settled operations.

A result is either a ``Success`` carrying a value or a ``Failure`` carrying the
exception that caused it. Batch operations return collections of results so
that successful values and failure reasons can be reported side by side
without raising and without losing the errors.

The two variants share the ``Outcome`` contract and mirror the objects
produced by a "settle all" combinator: ``status`` is ``"fulfilled"`` or
``"rejected"`` and ``to_json()`` has the same shape.

Example:
    >>> from results import result
    >>> ok = result("hi")
    >>> ok.ok, ok.value
    (True, 'hi')
    >>> failed = result(ValueError("db down"))
    >>> failed.status
    <ResultStatus.REJECTED: 'rejected'>
    >>> failed.enforce_value()
    Traceback (most recent call last):
    ...
    ValueError: db down
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Generic,
    Literal,
    NoReturn,
    TypeVar,
    Union,
    final,
    overload,
)

from ..foundation.errors import ResultContractError, SettledError

if TYPE_CHECKING:
    from ..foundation.errors import JsonDict

T = TypeVar("T")  # Success value type

_VARIANTS = frozenset({"Success", "Failure"})


class ResultStatus(StrEnum):
    """Status of a result; same values as standard settle-all records."""
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


class Outcome(ABC, Generic[T]):
    """Contract shared by the two result variants.

    Successes always have a value (possibly ``None`` for void operations) and
    never a reason. Failures always have a reason and never a value. Instances
    are immutable and never change variant.

    Only ``Success`` and ``Failure`` may subclass this type.
    """

    __slots__ = ()

    status: ClassVar[ResultStatus]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise TypeError(f"Cannot subclass {Outcome.__name__}: results are either Success or Failure")
        super().__init_subclass__(**kwargs)

    @property
    def ok(self) -> bool:
        """Whether this result is a success. Shorthand for checking ``status``."""
        return self.status is ResultStatus.FULFILLED

    @property
    @abstractmethod
    def value(self) -> T | None:
        """Value of a success; always ``None`` for a failure."""

    @property
    @abstractmethod
    def reason(self) -> BaseException | None:
        """Exception of a failure; always ``None`` for a success."""

    def enforce_value(self) -> T:
        """Return the value of a success, or raise the reason of a failure.

        The stored exception itself is raised, not a wrapper.
        """
        if not self.ok:
            raise self.reason  # type: ignore[misc]
        return self.value  # type: ignore[return-value]

    def enforce_error(self) -> BaseException:
        """Return the reason of a failure.

        Raises:
            ResultContractError: If this result is a success
        """
        if self.ok:
            raise ResultContractError("Expected result to have a failure reason but actually was a success")
        return self.reason  # type: ignore[return-value]

    def to_json(self) -> JsonDict:
        """Convert to a standard settle-all record.

        A void success (value ``None``) has no ``"value"`` key. The returned
        dict may hold objects that are not JSON-native (the reason is the
        exception itself); ``results.io.codec`` knows how to encode them.
        """
        if not self.ok:
            return {"status": self.status.value, "reason": self.reason}
        if self.value is None:
            return {"status": self.status.value}
        return {"status": self.status.value, "value": self.value}

    def __str__(self) -> str:
        return f"[object {type(self).__name__}]"

    def __bool__(self) -> bool:
        return self.ok


@final
class Success(Outcome[T]):
    """A successful result holding ``value``."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    status: ClassVar[Literal[ResultStatus.FULFILLED]] = ResultStatus.FULFILLED

    def __init__(self, value: T = None) -> None:  # type: ignore[assignment]
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    @property
    def reason(self) -> None:
        return None

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __reduce__(self) -> tuple[type[Success[T]], tuple[T]]:
        return (Success, (self._value,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return isinstance(other, Success) and self._value == other._value

    def __hash__(self) -> int:
        return hash((ResultStatus.FULFILLED, self._value))


@final
class Failure(Outcome[T]):
    """A failed result holding the exception ``reason``.

    A non-exception reason is coerced into a ``SettledError`` whose message is
    its ``str()``.
    """

    __slots__ = ("_reason",)
    __match_args__ = ("reason",)

    status: ClassVar[Literal[ResultStatus.REJECTED]] = ResultStatus.REJECTED

    def __init__(self, reason: BaseException) -> None:
        if not isinstance(reason, BaseException):
            reason = SettledError(str(reason), rejection=reason)
        object.__setattr__(self, "_reason", reason)

    @property
    def value(self) -> None:
        return None

    @property
    def reason(self) -> BaseException:
        return self._reason

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Failure({self._reason!r})"

    def __reduce__(self) -> tuple[type[Failure[T]], tuple[BaseException]]:
        return (Failure, (self._reason,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return isinstance(other, Failure) and self._reason == other._reason

    def __hash__(self) -> int:
        return hash((ResultStatus.REJECTED, self._reason))


Result = Union[Success[T], Failure[T]]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


@overload
def result() -> Success[None]: ...
@overload
def result(value: BaseException) -> Failure[Any]: ...
@overload
def result(value: T) -> Success[T]: ...
def result(value: Any = _MISSING) -> Result[Any]:
    """Create a result from an operation's outcome.

    This is the primary way to create results. Classification is by type
    alone: an exception instance becomes a failure, anything else (including
    dicts or objects that merely look like errors) becomes a success. To hold
    an exception as a success value, construct ``Success`` directly.

    Args:
        value: The successful value, or the exception the operation failed
            with. Omit for a successful operation with no value.

    Returns:
        ``Failure(value)`` for exceptions, otherwise ``Success(value)``

    Example:
        >>> result().value is None
        True
        >>> result({"message": "not an error"}).ok
        True
    """
    if value is _MISSING:
        return Success(None)
    if isinstance(value, BaseException):
        return Failure(value)
    return Success(value)
