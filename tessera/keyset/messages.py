"""
Serialized Key Messages

Key formats and keys of the bundled algorithms are pydantic models
serialized as JSON bytes. Unknown fields are rejected so that a payload
belonging to one key type never parses as another.
"""

from typing import Type, TypeVar

from pydantic import BaseModel, ConfigDict


M = TypeVar("M", bound="KeyMessage")


class KeyMessage(BaseModel):
    """Base for key and key-format messages."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    def serialize(self) -> bytes:
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def parse(cls: Type[M], data: bytes) -> M:
        """Parse serialized bytes; raises pydantic.ValidationError."""
        return cls.model_validate_json(data)
