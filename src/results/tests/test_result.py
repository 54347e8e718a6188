"""Tests for the Result variant type and the result() factory.

Validates:
- Factory classification (exceptions vs. everything else)
- Accessor and enforce contract of both variants
- Immutability and the closed variant hierarchy
- Equality, string coercion, and to_json() records
"""

from __future__ import annotations

import pickle

import pytest

from results import (
    Failure,
    Outcome,
    ResultContractError,
    ResultStatus,
    SettledError,
    Success,
    result,
)


# ═════════════════════════════════════════════════════════════════════════════
# Factory
# ═════════════════════════════════════════════════════════════════════════════


def test_creates_success() -> None:
    """Test a plain value becomes a success."""
    success = result("Success!")

    assert success.ok
    assert success.status is ResultStatus.FULFILLED
    assert success.value == "Success!"
    assert success.reason is None
    assert success.enforce_value() == "Success!"
    with pytest.raises(TypeError):
        success.enforce_error()


def test_creates_void_success() -> None:
    """Test no argument produces a success without a value."""
    success = result()

    assert success.ok
    assert success.status == "fulfilled"
    assert success.value is None
    assert success.reason is None
    assert success.enforce_value() is None
    with pytest.raises(ResultContractError):
        success.enforce_error()


def test_creates_failure() -> None:
    """Test an exception becomes a failure holding that exact object."""
    error = ValueError("Intentional error")
    failure = result(error)

    assert not failure.ok
    assert failure.status is ResultStatus.REJECTED
    assert failure.value is None
    assert failure.reason is error
    assert failure.enforce_error() is error
    with pytest.raises(ValueError, match="Intentional error") as exc_info:
        failure.enforce_value()
    assert exc_info.value is error


@pytest.mark.parametrize("value", [0, "", False, [], {}, None, 3.5, ("a", 1)])
def test_non_exceptions_are_successes(value: object) -> None:
    """Test falsy and container values are still successes."""
    success = result(value)

    assert success.ok
    assert success.value is value


def test_error_shaped_data_is_success() -> None:
    """Test classification ignores structure: error-looking data is a success."""
    class Looks:
        message = "not really an error"

    shaped = {"name": "Error", "message": "boom"}

    assert result(shaped).ok
    assert result(Looks()).ok


def test_any_exception_kind_is_failure() -> None:
    """Test subclasses and BaseException-only errors are failures."""
    class DomainError(LookupError):
        pass

    assert not result(DomainError("missing")).ok
    assert not result(KeyboardInterrupt()).ok


def test_exception_value_via_direct_success() -> None:
    """Test constructing Success directly can hold an exception as its value."""
    error = RuntimeError("kept as data")
    success = Success(error)

    assert success.ok
    assert success.value is error
    assert success.enforce_value() is error


def test_enforce_value_preserves_identity() -> None:
    """Test reference values come back as the same object."""
    payload = {"rows": [1, 2, 3]}

    assert result(payload).enforce_value() is payload


# ═════════════════════════════════════════════════════════════════════════════
# Failure Reason Coercion
# ═════════════════════════════════════════════════════════════════════════════


def test_failure_coerces_non_exception_reason() -> None:
    """Test Failure never holds a raw value as its reason."""
    failure = Failure("boom")  # type: ignore[arg-type]

    assert isinstance(failure.reason, SettledError)
    assert str(failure.reason) == "boom"
    assert failure.reason.rejection == "boom"


# ═════════════════════════════════════════════════════════════════════════════
# Immutability & Closed Hierarchy
# ═════════════════════════════════════════════════════════════════════════════


def test_success_is_immutable() -> None:
    success = result(1)

    with pytest.raises(AttributeError):
        success.value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        success.ok = False  # type: ignore[misc]
    with pytest.raises(AttributeError):
        success._value = 2  # type: ignore[misc]
    assert success.value == 1


def test_failure_is_immutable() -> None:
    failure = result(ValueError("x"))

    with pytest.raises(AttributeError):
        failure.reason = ValueError("y")  # type: ignore[misc]
    with pytest.raises(AttributeError):
        failure.status = ResultStatus.FULFILLED  # type: ignore[misc]


def test_variants_have_no_instance_dict() -> None:
    assert not hasattr(result(1), "__dict__")
    assert not hasattr(result(ValueError()), "__dict__")


def test_cannot_subclass_outcome() -> None:
    """Test the hierarchy is closed to exactly Success and Failure."""
    with pytest.raises(TypeError):
        class Pending(Outcome[int]):  # noqa: F841
            pass


def test_cannot_subclass_variants() -> None:
    with pytest.raises(TypeError):
        class Partial(Success[int]):  # noqa: F841
            pass


def test_ok_follows_status() -> None:
    for r in (result(1), result(), result(ValueError())):
        assert r.ok == (r.status is ResultStatus.FULFILLED)
        assert bool(r) == r.ok


# ═════════════════════════════════════════════════════════════════════════════
# Equality & Hashing
# ═════════════════════════════════════════════════════════════════════════════


def test_equality() -> None:
    """Test structural equality of successes, identity of failure reasons."""
    error = ValueError("x")

    assert result(42) == result(42)
    assert result(42) != result(43)
    assert result() == result(None)
    assert result(error) == result(error)
    assert result(error) != result(ValueError("x"))
    assert result(1) != result(ValueError("1"))
    assert result(1) != 1


def test_hashable() -> None:
    error = ValueError("x")

    assert len({result(1), result(1), result(error), result(error)}) == 2


def test_pickle_round_trip() -> None:
    restored = pickle.loads(pickle.dumps(result({"a": 1})))

    assert isinstance(restored, Success)
    assert restored.value == {"a": 1}

    failure = pickle.loads(pickle.dumps(result(KeyError("k"))))
    assert isinstance(failure, Failure)
    assert isinstance(failure.reason, KeyError)


# ═════════════════════════════════════════════════════════════════════════════
# String Coercion
# ═════════════════════════════════════════════════════════════════════════════


def test_string_representation_names_variant() -> None:
    """Test str() is a fixed token that never includes the payload."""
    assert str(result("Success!")) == "[object Success]"
    assert str(result()) == "[object Success]"
    assert str(result(ValueError("secret"))) == "[object Failure]"
    assert f"{result({'password': 'hunter2'})}" == "[object Success]"


def test_repr_shows_payload() -> None:
    assert repr(result("hi")) == "Success('hi')"
    assert repr(result(ValueError("x"))) == "Failure(ValueError('x'))"


# ═════════════════════════════════════════════════════════════════════════════
# to_json
# ═════════════════════════════════════════════════════════════════════════════


def test_to_json_success() -> None:
    assert result("Success!").to_json() == {"status": "fulfilled", "value": "Success!"}


def test_to_json_void_success_omits_value() -> None:
    record = result().to_json()

    assert record == {"status": "fulfilled"}
    assert "value" not in record


def test_to_json_failure() -> None:
    error = ValueError("Intentional error")
    record = result(error).to_json()

    assert record == {"status": "rejected", "reason": error}
    assert "value" not in record


def test_to_json_keeps_falsy_values() -> None:
    """Test only None is treated as void."""
    assert result(0).to_json() == {"status": "fulfilled", "value": 0}
    assert result("").to_json() == {"status": "fulfilled", "value": ""}
    assert result(False).to_json() == {"status": "fulfilled", "value": False}


# ═════════════════════════════════════════════════════════════════════════════
# Pattern Matching
# ═════════════════════════════════════════════════════════════════════════════


def test_match_variants() -> None:
    def describe(r: Success[int] | Failure[int]) -> str:
        match r:
            case Success(value):
                return f"ok:{value}"
            case Failure(reason):
                return f"err:{reason}"
        return "unreachable"

    assert describe(result(7)) == "ok:7"
    assert describe(result(ValueError("bad"))) == "err:bad"
