"""Type aliases and the serialized reason model.

Uses Pydantic models for validation/serialization of failure reasons.
"""

from __future__ import annotations

from traceback import format_exception
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import SettledError

# JSON type aliases - using Any for recursive types to avoid Pydantic resolution issues
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]


class ReasonPayload(BaseModel):
    """Serialized form of a failure reason. Pydantic frozen=True for immutability.

    Unknown keys (e.g. a "stack" from another producer) are ignored on input.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "title": "Failure Reason",
            "examples": [{"name": "ValueError", "message": "db down"}],
        },
    )

    name: Annotated[str, Field(min_length=1, description="Exception type name")] = "Error"
    message: str = Field(default="", description="str() of the exception")
    traceback: str | None = Field(default=None, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_traceback: bool = False) -> ReasonPayload:
        """Build payload from an exception (name is the revived name for SettledError)."""
        name = exc.name if isinstance(exc, SettledError) else None
        tb = "".join(format_exception(exc)) if include_traceback else None
        return cls.model_construct(name=name or type(exc).__name__, message=str(exc), traceback=tb)

    def to_dict(self) -> JsonDict:
        """Dump without absent optional fields."""
        return self.model_dump(exclude_none=True)

    def to_exception(self) -> SettledError:
        """Revive as a SettledError carrying the serialized name and message."""
        return SettledError(self.message, name=self.name)
