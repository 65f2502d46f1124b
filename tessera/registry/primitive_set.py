"""
PrimitiveSet

Materialized runtime form of a keyset: one entry per key and exactly
one designated primary. Instances are immutable.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from keyset.models import KeyStatus, OutputPrefixType


TINK_START_BYTE = b"\x01"
LEGACY_START_BYTE = b"\x00"


def output_prefix(key_id: int, prefix_type: OutputPrefixType) -> bytes:
    """Prefix prepended to a primitive's output for the given key."""
    if prefix_type == OutputPrefixType.TINK:
        return TINK_START_BYTE + key_id.to_bytes(4, "big")
    if prefix_type in (OutputPrefixType.LEGACY, OutputPrefixType.CRUNCHY):
        return LEGACY_START_BYTE + key_id.to_bytes(4, "big")
    if prefix_type == OutputPrefixType.RAW:
        return b""
    raise ValueError(f"Unknown output prefix type: {prefix_type}")


@dataclass(frozen=True)
class Entry:
    """One materialized key of a PrimitiveSet."""
    primitive: Any
    key_id: int
    status: KeyStatus
    prefix_type: OutputPrefixType

    @property
    def output_prefix(self) -> bytes:
        return output_prefix(self.key_id, self.prefix_type)


@dataclass(frozen=True)
class PrimitiveSet:
    primary: Entry
    entries: Mapping[int, Tuple[Entry, ...]] = field(default_factory=dict)

    def __post_init__(self):
        frozen = {key_id: tuple(group) for key_id, group in self.entries.items()}
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    @classmethod
    def from_entries(cls, primary: Entry, entries: List[Entry]) -> "PrimitiveSet":
        grouped: Dict[int, List[Entry]] = {}
        for entry in entries:
            grouped.setdefault(entry.key_id, []).append(entry)
        return cls(primary=primary, entries=grouped)

    def entries_for_key_id(self, key_id: int) -> Tuple[Entry, ...]:
        return self.entries.get(key_id, ())

    def all_entries(self) -> Tuple[Entry, ...]:
        return tuple(entry for group in self.entries.values() for entry in group)

    def entries_for_prefix(self, prefix: bytes) -> Tuple[Entry, ...]:
        """Entries whose output prefix equals prefix; UNKNOWN prefix types never match."""
        return tuple(
            entry for entry in self.all_entries()
            if entry.prefix_type != OutputPrefixType.UNKNOWN and entry.output_prefix == prefix
        )

    def raw_entries(self) -> Tuple[Entry, ...]:
        return self.entries_for_prefix(b"")

    def __len__(self) -> int:
        return sum(len(group) for group in self.entries.values())
