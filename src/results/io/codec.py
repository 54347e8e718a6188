"""Serialization codecs for results.

Provides orjson (fast JSON) and msgpack (binary) codecs that understand
results and exceptions anywhere inside the encoded value. Both are core
dependencies - no fallback to stdlib json.

A result encodes to the standard settle-all record:

    {"status":"fulfilled","value":"hi"}
    {"status":"fulfilled"}                      # void success
    {"status":"rejected","reason":{"name":"ValueError","message":"db down"}}

Usage:
    >>> from results import result
    >>> from results.io import dumps, loads_result
    >>> dumps(result("hi"))
    b'{"status":"fulfilled","value":"hi"}'
    >>> loads_result(b'{"status":"rejected","reason":{"name":"KeyError","message":"x"}}').reason
    SettledError('x', name='KeyError')
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal, Protocol, Union, runtime_checkable

import msgpack
import orjson
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..core.result import Failure, Outcome, Result, Success
from ..foundation.config import get_settings
from ..foundation.errors import JsonPrimitive, JsonValue, ReasonPayload, ResultDecodeError, SettledError
from ..runtime.observability.logging import get_logger

_log = get_logger("results.codec")


class CodecType(StrEnum):
    """Supported codec types."""
    ORJSON = "orjson"
    MSGPACK = "msgpack"


@runtime_checkable
class Codec(Protocol):
    """Protocol for serialization codecs."""

    name: str
    content_type: str

    def encode(self, data: object) -> bytes: ...
    def decode(self, data: bytes) -> JsonValue: ...
    def decode_result(self, data: bytes) -> Result[Any]: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Settle-all Records
# ═══════════════════════════════════════════════════════════════════════════════


class FulfilledRecord(BaseModel):
    """Record of a success. ``value`` absent means a void success."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Literal["fulfilled"]
    value: Any = None


class RejectedRecord(BaseModel):
    """Record of a failure. ``reason`` may come from another producer as a bare string."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Literal["rejected"]
    reason: Union[ReasonPayload, JsonPrimitive, list[Any]]


SettledRecord = Annotated[Union[FulfilledRecord, RejectedRecord], Field(discriminator="status")]
_record_adapter: TypeAdapter[FulfilledRecord | RejectedRecord] = TypeAdapter(SettledRecord)


def revive(record: object) -> Result[Any]:
    """Rebuild a Result from a decoded settle-all record.

    A rejected record's reason becomes a ``SettledError``. Structured reasons
    keep their ``name`` and ``message``; anything else is stringified.

    Raises:
        ResultDecodeError: If record is not a valid settle-all record
    """
    try:
        parsed = _record_adapter.validate_python(record)
    except ValidationError as e:
        raise ResultDecodeError(f"Invalid result record: {e.error_count()} validation error(s)") from e
    if isinstance(parsed, FulfilledRecord):
        return Success(parsed.value)
    if isinstance(parsed.reason, ReasonPayload):
        return Failure(parsed.reason.to_exception())
    return Failure(SettledError(str(parsed.reason), rejection=parsed.reason))


# ═══════════════════════════════════════════════════════════════════════════════
# Default Hook
# ═══════════════════════════════════════════════════════════════════════════════


def _default(obj: object) -> object:
    """Encode results and exceptions; used by both codecs."""
    if isinstance(obj, Outcome):
        return obj.to_json()
    if isinstance(obj, BaseException):
        include_tb = get_settings().codec.include_traceback
        return ReasonPayload.from_exception(obj, include_traceback=include_tb).to_dict()
    raise TypeError(f"Type is not serializable: {type(obj).__name__}")


def _orjson_options() -> int:
    option = orjson.OPT_UTC_Z
    if get_settings().codec.sort_keys:
        option |= orjson.OPT_SORT_KEYS
    return option


# ═══════════════════════════════════════════════════════════════════════════════
# Codec Implementations
# ═══════════════════════════════════════════════════════════════════════════════


class OrjsonCodec:
    """orjson codec - 3-10x faster than stdlib json."""

    __slots__ = ()
    name = "orjson"
    content_type = "application/json"

    def encode(self, data: object) -> bytes:
        return dumps(data)

    def decode(self, data: bytes) -> JsonValue:
        return loads(data)

    def decode_result(self, data: bytes) -> Result[Any]:
        return loads_result(data)


class MsgpackCodec:
    """MessagePack codec - binary protocol, smaller payloads than JSON."""

    __slots__ = ()
    name = "msgpack"
    content_type = "application/msgpack"

    def encode(self, data: object) -> bytes:
        return pack(data)

    def decode(self, data: bytes) -> JsonValue:
        return unpack(data)

    def decode_result(self, data: bytes) -> Result[Any]:
        return unpack_result(data)


_orjson = OrjsonCodec()
_msgpack = MsgpackCodec()

_CODECS: dict[str, Codec] = {"orjson": _orjson, "msgpack": _msgpack}


def get_codec(name: str | CodecType | None = None) -> Codec:
    """Get codec by name (default: ``RESULTS_CODEC_DEFAULT``).

    Raises:
        KeyError: If no codec is registered under name
    """
    key = str(name) if name else get_settings().codec.default
    try:
        return _CODECS[key]
    except KeyError:
        raise KeyError(f"Unknown codec: {key}. Available: {', '.join(sorted(_CODECS))}") from None


def register_codec(name: str, codec: Codec) -> None:
    """Register custom codec implementation."""
    _CODECS[name] = codec


# ═══════════════════════════════════════════════════════════════════════════════
# Direct Functions
# ═══════════════════════════════════════════════════════════════════════════════


def dumps(data: object) -> bytes:
    """Encode to JSON bytes (orjson). Results and exceptions may appear anywhere."""
    return orjson.dumps(data, default=_default, option=_orjson_options())


def dumps_str(data: object) -> str:
    """Encode to JSON string (orjson)."""
    return dumps(data).decode()


def loads(data: bytes | str) -> JsonValue:
    """Decode from JSON bytes/str (orjson)."""
    return orjson.loads(data)


def loads_result(data: bytes | str) -> Result[Any]:
    """Decode a JSON settle-all record into a Result.

    Raises:
        ResultDecodeError: If data is not JSON or not a valid record
    """
    try:
        record = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        _log.debug("undecodable result record", codec="orjson", error=str(e))
        raise ResultDecodeError(f"Invalid JSON: {e}") from e
    return revive(record)


def pack(data: object) -> bytes:
    """Encode to msgpack bytes."""
    return msgpack.packb(data, default=_default, use_bin_type=True, strict_types=False)


def unpack(data: bytes) -> JsonValue:
    """Decode from msgpack bytes."""
    return msgpack.unpackb(data, raw=False, strict_map_key=False)


def unpack_result(data: bytes) -> Result[Any]:
    """Decode a msgpack settle-all record into a Result.

    Raises:
        ResultDecodeError: If data is not msgpack or not a valid record
    """
    try:
        record = unpack(data)
    except (msgpack.UnpackException, ValueError) as e:
        _log.debug("undecodable result record", codec="msgpack", error=str(e))
        raise ResultDecodeError(f"Invalid msgpack: {e}") from e
    return revive(record)
