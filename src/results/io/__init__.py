"""Serialization of results to settle-all records (orjson / msgpack) and back."""

from .codec import (
    Codec,
    CodecType,
    FulfilledRecord,
    MsgpackCodec,
    OrjsonCodec,
    RejectedRecord,
    SettledRecord,
    dumps,
    dumps_str,
    get_codec,
    loads,
    loads_result,
    pack,
    register_codec,
    revive,
    unpack,
    unpack_result,
)

__all__ = [
    # Codecs
    "Codec", "CodecType", "OrjsonCodec", "MsgpackCodec", "get_codec", "register_codec",
    # Records
    "SettledRecord", "FulfilledRecord", "RejectedRecord", "revive",
    # Direct functions
    "dumps", "dumps_str", "loads", "loads_result", "pack", "unpack", "unpack_result",
]
