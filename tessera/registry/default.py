"""
Process-wide default registry, created lazily from settings.
"""

import logging
import threading
from typing import Optional

from config import get_settings
from .registry import Registry

logger = logging.getLogger(__name__)

_default_registry: Optional[Registry] = None
_default_lock = threading.Lock()


def default_registry() -> Registry:
    """Get the singleton default registry."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            settings = get_settings()
            registry = Registry(strict=settings.strict_registration)
            if settings.register_defaults:
                import aead
                import mac
                aead.register(registry)
                mac.register(registry)
                logger.info("Default registry populated with %d key managers", len(registry))
            _default_registry = registry
        return _default_registry


def resolve(registry: Optional[Registry]) -> Registry:
    return registry if registry is not None else default_registry()
