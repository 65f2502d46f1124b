"""
Keyset Data Models
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


MAX_KEY_ID = 2**32 - 1


class KeyStatus(Enum):
    """Key status within a keyset."""
    UNKNOWN = 0
    ENABLED = 1
    DISABLED = 2
    DESTROYED = 3


class OutputPrefixType(Enum):
    """How a primitive's output is tagged for later key-id lookup."""
    UNKNOWN = 0
    TINK = 1
    LEGACY = 2
    RAW = 3
    CRUNCHY = 4


class KeyMaterialType(Enum):
    UNKNOWN = 0
    SYMMETRIC = 1
    ASYMMETRIC_PRIVATE = 2
    ASYMMETRIC_PUBLIC = 3
    REMOTE = 4


@dataclass(frozen=True)
class KeyTemplate:
    """Parameters for generating a new key."""
    type_url: str
    value: bytes
    output_prefix_type: OutputPrefixType = OutputPrefixType.TINK


@dataclass(frozen=True)
class KeyData:
    """A typed, serialized key plus its material classification."""
    type_url: str
    value: bytes = field(repr=False)
    key_material_type: KeyMaterialType = KeyMaterialType.UNKNOWN


@dataclass(frozen=True)
class KeysetKey:
    """One member of a keyset."""
    key_data: Optional[KeyData]
    status: KeyStatus
    key_id: int
    output_prefix_type: OutputPrefixType

    def __post_init__(self):
        if not isinstance(self.key_id, int) or not 0 <= self.key_id <= MAX_KEY_ID:
            raise ValueError(f"Key id must be a uint32, got {self.key_id!r}")


@dataclass(frozen=True)
class Keyset:
    """
    An ordered group of keys with one declared primary id.

    The single-enabled-primary invariant is not checked here; it is
    enforced when the keyset is turned into a PrimitiveSet.
    """
    primary_key_id: int
    keys: Tuple[KeysetKey, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "keys", tuple(self.keys))
