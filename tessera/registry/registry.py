"""
Key Manager Registry

Thread-safe binding from type URL to exactly one key manager.
The first registrant for a type URL stays authoritative.
"""

import logging
import threading
from typing import Dict, List, Optional

from .exceptions import InvalidArgumentError, NotFoundError, RegistrationConflictError
from .key_manager import KeyManager

logger = logging.getLogger(__name__)


class Registry:
    """
    Type URL to key manager binding.

    Features:
    - First registration wins; later registrations are ignored
    - Optional strict mode rejecting a conflicting manager class
    - Thread-safe access
    """

    def __init__(self, strict: bool = False):
        self._managers: Dict[str, KeyManager] = {}
        self._lock = threading.RLock()
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def register(self, manager: Optional[KeyManager]) -> None:
        """
        Bind a key manager to its type URL.

        Args:
            manager: The key manager to register

        Raises:
            InvalidArgumentError: If manager is None
            RegistrationConflictError: In strict mode, if a manager of a
                different class is already bound to the type URL
        """
        if manager is None:
            raise InvalidArgumentError("Key manager must not be None")

        type_url = manager.type_url
        with self._lock:
            existing = self._managers.get(type_url)
            if existing is None:
                self._managers[type_url] = manager
                logger.info("Registered key manager for %s", type_url)
                return

            if self._strict and type(existing) is not type(manager):
                raise RegistrationConflictError(
                    f"Type URL {type_url} is already bound to {type(existing).__name__}",
                    type_url=type_url,
                )

        if existing is not manager:
            logger.warning(
                "Ignoring registration of %s for %s: already bound to %s",
                type(manager).__name__, type_url, type(existing).__name__,
            )

    def get(self, type_url: str) -> KeyManager:
        """
        Look up the key manager for a type URL.

        Raises:
            NotFoundError: If no manager is bound to the type URL
        """
        with self._lock:
            manager = self._managers.get(type_url)
        if manager is None:
            raise NotFoundError(f"No key manager registered for {type_url}", type_url=type_url)
        return manager

    def type_urls(self) -> List[str]:
        """List all bound type URLs."""
        with self._lock:
            return list(self._managers.keys())

    def __contains__(self, type_url: object) -> bool:
        with self._lock:
            return type_url in self._managers

    def __len__(self) -> int:
        with self._lock:
            return len(self._managers)
