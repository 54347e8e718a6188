"""Error taxonomy for results.

- ResultsError: base of everything raised by this package
- ResultContractError: contract violations (a TypeError)
- SettledError: reasons built from non-exception rejections or revived records
- ResultDecodeError: invalid serialized records
- ReasonPayload: pydantic model for a serialized failure reason
"""

from .errors import ResultContractError, ResultDecodeError, ResultsError, SettledError
from .types import JsonDict, JsonPrimitive, JsonValue, ReasonPayload

__all__ = [
    # Exceptions
    "ResultsError", "ResultContractError", "SettledError", "ResultDecodeError",
    # Serialized reason
    "ReasonPayload",
    # JSON aliases
    "JsonDict", "JsonPrimitive", "JsonValue",
]
