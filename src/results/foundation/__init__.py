"""Foundation: configuration and error taxonomy."""

from .config import ResultsSettings, clear_settings_cache, get_settings
from .errors import (
    JsonDict,
    JsonValue,
    ReasonPayload,
    ResultContractError,
    ResultDecodeError,
    ResultsError,
    SettledError,
)

__all__ = [
    "ResultsSettings", "get_settings", "clear_settings_cache",
    "ResultsError", "ResultContractError", "SettledError", "ResultDecodeError",
    "ReasonPayload", "JsonDict", "JsonValue",
]
