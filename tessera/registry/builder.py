"""
PrimitiveSet Builder

Validates a keyset handle and materializes every key into a primitive,
then selects the unique enabled primary.

Every key is materialized regardless of status so that decrypt/verify
paths can still try any key id found in received data, while callers
that encrypt or sign always get one unambiguous primary.
"""

import logging
from typing import Any, List, Optional

from keyset.models import KeyStatus, KeysetKey
from .default import resolve
from .exceptions import (
    InvalidArgumentError,
    InvalidKeyError,
    InvalidPrimaryKeyError,
    NotFoundError,
    TesseraError,
)
from .key_manager import KeyManager
from .primitive_set import Entry, PrimitiveSet
from .registry import Registry

logger = logging.getLogger(__name__)


def primitives(handle: Any, registry: Optional[Registry] = None) -> PrimitiveSet:
    """Build a PrimitiveSet resolving every key through the registry."""
    return primitives_with_key_manager(handle, None, registry)


def primitives_with_key_manager(
    handle: Any,
    key_manager: Optional[KeyManager] = None,
    registry: Optional[Registry] = None,
) -> PrimitiveSet:
    """
    Build a PrimitiveSet from a keyset handle.

    Args:
        handle: Keyset handle to materialize
        key_manager: Optional manager used for every key whose type URL it
            supports, bypassing the registry binding
        registry: Registry to resolve through (default registry if None)

    Returns:
        A new PrimitiveSet with one entry per key and one primary

    Raises:
        InvalidArgumentError: If handle is None, the keyset is empty, or a
            key has no key data
        NotFoundError: If a key's type URL is not registered
        InvalidKeyError: If a key's bytes cannot be parsed
        InvalidPrimaryKeyError: If zero or several enabled keys carry the
            primary key id
    """
    if handle is None:
        raise InvalidArgumentError("Keyset handle must not be None")
    keyset = handle.keyset
    if keyset is None or not keyset.keys:
        raise InvalidArgumentError("Keyset must contain at least one key")

    registry = resolve(registry)
    entries: List[Entry] = []
    for key in keyset.keys:
        manager = _manager_for(key, key_manager, registry)
        entries.append(Entry(
            primitive=_build_primitive(manager, key),
            key_id=key.key_id,
            status=key.status,
            prefix_type=key.output_prefix_type,
        ))

    primary = _select_primary(entries, keyset.primary_key_id)
    logger.debug(
        "Built primitive set: %d entries, primary key %d",
        len(entries), primary.key_id,
    )
    return PrimitiveSet.from_entries(primary, entries)


def _manager_for(key: KeysetKey, key_manager: Optional[KeyManager], registry: Registry) -> KeyManager:
    if key.key_data is None:
        raise InvalidArgumentError(f"Key {key.key_id} has no key data", key_id=key.key_id)

    type_url = key.key_data.type_url
    if key_manager is not None and key_manager.supports(type_url):
        logger.debug("Using override key manager for key %d (%s)", key.key_id, type_url)
        return key_manager

    try:
        return registry.get(type_url)
    except NotFoundError as e:
        raise NotFoundError(
            f"No key manager registered for {type_url} (key {key.key_id})",
            type_url=type_url,
            key_id=key.key_id,
        ) from e


def _build_primitive(manager: KeyManager, key: KeysetKey) -> Any:
    try:
        return manager.primitive(key.key_data.value)
    except InvalidKeyError as e:
        raise InvalidKeyError(
            f"Cannot build primitive for key {key.key_id}: {e}",
            type_url=key.key_data.type_url,
            key_id=key.key_id,
        ) from e
    except TesseraError as e:
        if e.key_id is None:
            e.key_id = key.key_id
        raise
    except Exception as e:
        raise InvalidKeyError(
            f"Cannot build primitive for key {key.key_id}: {e}",
            type_url=key.key_data.type_url,
            key_id=key.key_id,
        ) from e


def _select_primary(entries: List[Entry], primary_key_id: int) -> Entry:
    candidates = [
        entry for entry in entries
        if entry.key_id == primary_key_id and entry.status == KeyStatus.ENABLED
    ]
    if not candidates:
        raise InvalidPrimaryKeyError(
            f"Keyset has no enabled key with primary id {primary_key_id}",
            key_id=primary_key_id,
        )
    if len(candidates) > 1:
        raise InvalidPrimaryKeyError(
            f"Keyset has {len(candidates)} enabled keys with primary id {primary_key_id}",
            key_id=primary_key_id,
        )
    return candidates[0]
