"""
Keyset Handle

Read-only wrapper around a Keyset, plus helpers for assembling keysets.
"""

import secrets
from typing import Iterable, List, Optional

from registry.exceptions import InvalidArgumentError
from .models import (
    MAX_KEY_ID,
    KeyData,
    KeyStatus,
    KeyTemplate,
    Keyset,
    KeysetKey,
    OutputPrefixType,
)


class KeysetHandle:
    """
    Validated, read-only wrapper around a Keyset.

    The wrapped Keyset is a frozen dataclass, so the handle can be shared
    between threads without synchronization.
    """

    __slots__ = ("_keyset",)

    def __init__(self, keyset: Optional[Keyset]):
        if keyset is None:
            raise InvalidArgumentError("Keyset must not be None")
        object.__setattr__(self, "_keyset", keyset)

    def __setattr__(self, name, value):
        raise AttributeError("KeysetHandle is read-only")

    @property
    def keyset(self) -> Keyset:
        return self._keyset

    @property
    def primary_key_id(self) -> int:
        return self._keyset.primary_key_id

    def key_ids(self) -> List[int]:
        return [key.key_id for key in self._keyset.keys]

    def __len__(self) -> int:
        return len(self._keyset.keys)

    def __repr__(self) -> str:
        return f"KeysetHandle(primary_key_id={self.primary_key_id}, keys={self.key_ids()})"

    @classmethod
    def generate_new(cls, template: Optional[KeyTemplate], registry=None) -> "KeysetHandle":
        """
        Create a handle for a new one-key keyset generated from a template.

        Raises:
            InvalidArgumentError: If template is None
            NotFoundError: If the template's type URL is not registered
            TemplateFormatError: If the template value is malformed
        """
        from registry.generator import new_key_data

        key_data = new_key_data(template, registry)
        key_id = new_key_id()
        key = create_key(key_data, KeyStatus.ENABLED, key_id, template.output_prefix_type)
        return cls(create_keyset(key_id, [key]))


def new_key_id(existing: Iterable[int] = ()) -> int:
    """Pick a random non-zero uint32 key id not in existing."""
    taken = set(existing)
    while True:
        key_id = secrets.randbelow(MAX_KEY_ID) + 1
        if key_id not in taken:
            return key_id


def create_key(
    key_data: Optional[KeyData],
    status: KeyStatus,
    key_id: int,
    prefix_type: OutputPrefixType,
) -> KeysetKey:
    return KeysetKey(
        key_data=key_data,
        status=status,
        key_id=key_id,
        output_prefix_type=prefix_type,
    )


def create_keyset(primary_key_id: int, keys: Optional[Iterable[KeysetKey]]) -> Keyset:
    return Keyset(primary_key_id=primary_key_id, keys=tuple(keys or ()))
