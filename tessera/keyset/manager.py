"""
Keyset Manager

Mutable builder for keysets: adds generated keys, rotates the primary
and enforces key status transitions.

State Machine:

    ENABLED <-> DISABLED
       |           |
       +---------> DESTROYED (key material dropped)

Only an ENABLED key can become primary, and the primary can be neither
disabled nor destroyed.
"""

import logging
import threading
from dataclasses import replace
from typing import List, Optional

from registry.exceptions import InvalidArgumentError, KeysetStateError
from .handle import KeysetHandle, create_key, create_keyset, new_key_id
from .models import KeyStatus, KeyTemplate, Keyset, KeysetKey

logger = logging.getLogger(__name__)


class KeysetManager:
    """
    Builds and rotates a keyset, producing immutable handles on demand.

    Args:
        handle: Optional handle whose keyset seeds the manager
        registry: Registry used to generate new keys (default registry if None)
    """

    def __init__(self, handle: Optional[KeysetHandle] = None, registry=None):
        self._lock = threading.RLock()
        self._registry = registry
        self._primary_key_id = 0
        self._keys: List[KeysetKey] = []
        if handle is not None:
            self._primary_key_id = handle.keyset.primary_key_id
            self._keys = list(handle.keyset.keys)

    def add(self, template: Optional[KeyTemplate], as_primary: bool = False) -> int:
        """
        Generate a new ENABLED key from a template and add it.

        Returns:
            The new key's id
        """
        from registry.generator import new_key_data

        if template is None:
            raise InvalidArgumentError("Key template must not be None")
        key_data = new_key_data(template, self._registry)
        with self._lock:
            key_id = new_key_id(key.key_id for key in self._keys)
            self._keys.append(
                create_key(key_data, KeyStatus.ENABLED, key_id, template.output_prefix_type)
            )
            logger.debug("Key %d: added (%s)", key_id, template.type_url)
            if as_primary:
                self.set_primary(key_id)
            return key_id

    def rotate(self, template: Optional[KeyTemplate]) -> int:
        """Add a new key from template and make it the primary."""
        return self.add(template, as_primary=True)

    def set_primary(self, key_id: int) -> None:
        with self._lock:
            key = self._find(key_id)
            if key.status != KeyStatus.ENABLED:
                raise KeysetStateError(
                    f"Cannot make key {key_id} primary in state {key.status.name}",
                    key_id=key_id,
                )
            self._primary_key_id = key_id
            logger.info("Key %d: -> PRIMARY", key_id)

    def enable(self, key_id: int) -> None:
        with self._lock:
            key = self._find(key_id)
            if key.status == KeyStatus.DESTROYED:
                raise KeysetStateError(f"Cannot enable destroyed key {key_id}", key_id=key_id)
            self._set_status(key, KeyStatus.ENABLED)

    def disable(self, key_id: int) -> None:
        with self._lock:
            key = self._find(key_id)
            self._check_not_primary(key_id, "disable")
            if key.status == KeyStatus.DESTROYED:
                raise KeysetStateError(f"Cannot disable destroyed key {key_id}", key_id=key_id)
            self._set_status(key, KeyStatus.DISABLED)

    def destroy(self, key_id: int) -> None:
        with self._lock:
            key = self._find(key_id)
            self._check_not_primary(key_id, "destroy")
            self._replace(key, replace(key, status=KeyStatus.DESTROYED, key_data=None))
            logger.info("Key %d: -> DESTROYED", key_id)

    def keyset(self) -> Keyset:
        with self._lock:
            return create_keyset(self._primary_key_id, self._keys)

    def handle(self) -> KeysetHandle:
        return KeysetHandle(self.keyset())

    def _find(self, key_id: int) -> KeysetKey:
        for key in self._keys:
            if key.key_id == key_id:
                return key
        raise InvalidArgumentError(f"Key {key_id} not found in keyset", key_id=key_id)

    def _check_not_primary(self, key_id: int, action: str) -> None:
        if key_id == self._primary_key_id:
            raise KeysetStateError(f"Cannot {action} primary key {key_id}", key_id=key_id)

    def _set_status(self, key: KeysetKey, status: KeyStatus) -> None:
        if key.status == status:
            return
        self._replace(key, replace(key, status=status))
        logger.debug("Key %d: %s -> %s", key.key_id, key.status.name, status.name)

    def _replace(self, old: KeysetKey, new: KeysetKey) -> None:
        self._keys[self._keys.index(old)] = new
