"""
Keyset Package

Keys, keysets and the read-only handles passed to the registry's
PrimitiveSet builder.
"""

from .models import (
    KeyStatus,
    OutputPrefixType,
    KeyMaterialType,
    KeyTemplate,
    KeyData,
    KeysetKey,
    Keyset,
)
from .messages import KeyMessage
from .handle import KeysetHandle, create_key, create_keyset, new_key_id
from .manager import KeysetManager

__all__ = [
    "KeyStatus",
    "OutputPrefixType",
    "KeyMaterialType",
    "KeyTemplate",
    "KeyData",
    "KeysetKey",
    "Keyset",
    "KeyMessage",
    "KeysetHandle",
    "KeysetManager",
    "create_key",
    "create_keyset",
    "new_key_id",
]
