"""
MAC Package

HMAC key manager and key templates.
"""

from typing import Optional

from keyset.models import KeyTemplate
from registry.default import resolve
from registry.registry import Registry
from .hmac_key_manager import (
    HMAC_TYPE_URL,
    HashType,
    Hmac,
    HmacKey,
    HmacKeyFormat,
    HmacKeyManager,
    HmacParams,
    MacVerificationError,
)


def register(registry: Optional[Registry] = None) -> None:
    """Register the MAC key managers (default registry if None)."""
    resolve(registry).register(HmacKeyManager())


def hmac_key_template(key_size: int, tag_size: int, hash_type: HashType) -> KeyTemplate:
    key_format = HmacKeyFormat(
        params=HmacParams(hash=hash_type, tag_size=tag_size),
        key_size=key_size,
    )
    return KeyTemplate(type_url=HMAC_TYPE_URL, value=key_format.serialize())


def hmac_sha256_tag128_key_template() -> KeyTemplate:
    """HMAC-SHA256 with a 32-byte key and 16-byte tag."""
    return hmac_key_template(32, 16, HashType.SHA256)


def hmac_sha256_tag256_key_template() -> KeyTemplate:
    """HMAC-SHA256 with a 32-byte key and 32-byte tag."""
    return hmac_key_template(32, 32, HashType.SHA256)


__all__ = [
    "HMAC_TYPE_URL",
    "HashType",
    "Hmac",
    "HmacKey",
    "HmacKeyFormat",
    "HmacKeyManager",
    "HmacParams",
    "MacVerificationError",
    "register",
    "hmac_key_template",
    "hmac_sha256_tag128_key_template",
    "hmac_sha256_tag256_key_template",
]
