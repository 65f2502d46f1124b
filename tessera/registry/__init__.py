"""
Registry Package

Binds type URLs to key managers and turns templates, serialized keys
and keyset handles into keys and live primitives.

Module-level helpers operate on the process-wide default registry;
every helper also accepts an explicit registry.
"""

from typing import Optional

from .builder import primitives, primitives_with_key_manager
from .default import default_registry
from .exceptions import (
    TesseraError,
    InvalidArgumentError,
    NotFoundError,
    TemplateFormatError,
    InvalidKeyError,
    InvalidPrimaryKeyError,
    RegistrationConflictError,
    KeysetStateError,
)
from .factory import primitive, primitive_from_key_data
from .generator import new_key, new_key_data
from .key_manager import KeyManager, MessageKeyManager
from .primitive_set import Entry, PrimitiveSet, output_prefix
from .registry import Registry


def register_key_manager(manager: Optional[KeyManager]) -> None:
    """Register a key manager in the default registry."""
    default_registry().register(manager)


def get_key_manager(type_url: str) -> KeyManager:
    """Get a key manager from the default registry."""
    return default_registry().get(type_url)


__all__ = [
    "Registry",
    "KeyManager",
    "MessageKeyManager",
    "Entry",
    "PrimitiveSet",
    "output_prefix",
    "default_registry",
    "register_key_manager",
    "get_key_manager",
    "new_key",
    "new_key_data",
    "primitive",
    "primitive_from_key_data",
    "primitives",
    "primitives_with_key_manager",
    "TesseraError",
    "InvalidArgumentError",
    "NotFoundError",
    "TemplateFormatError",
    "InvalidKeyError",
    "InvalidPrimaryKeyError",
    "RegistrationConflictError",
    "KeysetStateError",
]
