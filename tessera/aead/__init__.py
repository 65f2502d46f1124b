"""
AEAD Package

Key managers and key templates for authenticated encryption:
AES-GCM, ChaCha20-Poly1305 and XChaCha20-Poly1305.
"""

import logging
from typing import Optional

from keyset.models import KeyTemplate, OutputPrefixType
from registry.default import resolve
from registry.registry import Registry
from .aes_gcm import AES_GCM_TYPE_URL, AesGcm, AesGcmKey, AesGcmKeyFormat, AesGcmKeyManager
from .chacha20_poly1305 import (
    CHACHA20_POLY1305_TYPE_URL,
    XCHACHA20_POLY1305_TYPE_URL,
    ChaCha20Poly1305Aead,
    ChaCha20Poly1305KeyFormat,
    ChaCha20Poly1305KeyManager,
    XChaCha20Poly1305Aead,
    XChaCha20Poly1305KeyFormat,
    XChaCha20Poly1305KeyManager,
)

logger = logging.getLogger(__name__)


def register(registry: Optional[Registry] = None) -> None:
    """Register the AEAD key managers (default registry if None)."""
    registry = resolve(registry)
    registry.register(AesGcmKeyManager())
    registry.register(ChaCha20Poly1305KeyManager())
    registry.register(XChaCha20Poly1305KeyManager())
    logger.debug("AEAD key managers registered")


def aes_gcm_key_template(
    key_size: int,
    output_prefix_type: OutputPrefixType = OutputPrefixType.TINK,
) -> KeyTemplate:
    return KeyTemplate(
        type_url=AES_GCM_TYPE_URL,
        value=AesGcmKeyFormat(key_size=key_size).serialize(),
        output_prefix_type=output_prefix_type,
    )


def aes128_gcm_key_template() -> KeyTemplate:
    """AES-GCM with a 16-byte key."""
    return aes_gcm_key_template(16)


def aes256_gcm_key_template() -> KeyTemplate:
    """AES-GCM with a 32-byte key."""
    return aes_gcm_key_template(32)


def chacha20_poly1305_key_template() -> KeyTemplate:
    return KeyTemplate(
        type_url=CHACHA20_POLY1305_TYPE_URL,
        value=ChaCha20Poly1305KeyFormat().serialize(),
    )


def xchacha20_poly1305_key_template() -> KeyTemplate:
    return KeyTemplate(
        type_url=XCHACHA20_POLY1305_TYPE_URL,
        value=XChaCha20Poly1305KeyFormat().serialize(),
    )


__all__ = [
    "AES_GCM_TYPE_URL",
    "CHACHA20_POLY1305_TYPE_URL",
    "XCHACHA20_POLY1305_TYPE_URL",
    "AesGcm",
    "AesGcmKey",
    "AesGcmKeyManager",
    "ChaCha20Poly1305Aead",
    "ChaCha20Poly1305KeyManager",
    "XChaCha20Poly1305Aead",
    "XChaCha20Poly1305KeyManager",
    "register",
    "aes_gcm_key_template",
    "aes128_gcm_key_template",
    "aes256_gcm_key_template",
    "chacha20_poly1305_key_template",
    "xchacha20_poly1305_key_template",
]
