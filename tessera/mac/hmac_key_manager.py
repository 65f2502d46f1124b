"""
HMAC Key Manager

HMAC (RFC 2104) over SHA-1, SHA-256 or SHA-512 with tags truncated to
the configured size.
"""

import os
import secrets
from enum import Enum

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.hmac import HMAC

from keyset.messages import KeyMessage
from registry.exceptions import InvalidKeyError, TemplateFormatError, TesseraError
from registry.key_manager import MessageKeyManager


HMAC_TYPE_URL = "type.googleapis.com/google.crypto.tink.HmacKey"

MIN_KEY_SIZE = 16
MAX_KEY_SIZE = 1024
MIN_TAG_SIZE = 10


class HashType(str, Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"


_HASHES = {
    HashType.SHA1: hashes.SHA1,
    HashType.SHA256: hashes.SHA256,
    HashType.SHA512: hashes.SHA512,
}


class MacVerificationError(TesseraError):
    """Tag does not match the data."""
    pass


class HmacParams(KeyMessage):
    hash: HashType
    tag_size: int


class HmacKeyFormat(KeyMessage):
    params: HmacParams
    key_size: int
    version: int = 0


class HmacKey(KeyMessage):
    version: int = 0
    params: HmacParams
    key_value: bytes


def _check_params(params: HmacParams) -> str:
    """Return an error message for invalid params, or an empty string."""
    digest_size = _HASHES[params.hash].digest_size
    if params.tag_size < MIN_TAG_SIZE:
        return f"Tag size {params.tag_size} is below the minimum {MIN_TAG_SIZE}"
    if params.tag_size > digest_size:
        return f"Tag size {params.tag_size} exceeds {params.hash.value} digest size {digest_size}"
    return ""


class Hmac:
    """HMAC primitive producing truncated tags."""

    def __init__(self, hash_type: HashType, key: bytes, tag_size: int):
        self.hash_type = hash_type
        self.key = key
        self.tag_size = tag_size

    def compute_mac(self, data: bytes) -> bytes:
        h = HMAC(self.key, _HASHES[self.hash_type]())
        h.update(data)
        return h.finalize()[:self.tag_size]

    def verify_mac(self, tag: bytes, data: bytes) -> None:
        """
        Raises:
            MacVerificationError: If tag is not the MAC of data
        """
        if not secrets.compare_digest(self.compute_mac(data), tag):
            raise MacVerificationError("Invalid MAC")


class HmacKeyManager(MessageKeyManager):
    key_message = HmacKey
    format_message = HmacKeyFormat

    @property
    def type_url(self) -> str:
        return HMAC_TYPE_URL

    def validate_key_format(self, key_format: HmacKeyFormat) -> None:
        if key_format.key_size < MIN_KEY_SIZE:
            raise TemplateFormatError(
                f"HMAC key size {key_format.key_size} is below the minimum {MIN_KEY_SIZE}",
                type_url=self.type_url,
            )
        if key_format.key_size > MAX_KEY_SIZE:
            raise TemplateFormatError(
                f"HMAC key size {key_format.key_size} exceeds the maximum {MAX_KEY_SIZE}",
                type_url=self.type_url,
            )
        error = _check_params(key_format.params)
        if error:
            raise TemplateFormatError(error, type_url=self.type_url)

    def validate_key(self, key: HmacKey) -> None:
        if len(key.key_value) < MIN_KEY_SIZE:
            raise InvalidKeyError(
                f"HMAC key size {len(key.key_value)} is below the minimum {MIN_KEY_SIZE}",
                type_url=self.type_url,
            )
        error = _check_params(key.params)
        if error:
            raise InvalidKeyError(error, type_url=self.type_url)

    def generate_key(self, key_format: HmacKeyFormat) -> HmacKey:
        return HmacKey(
            version=0,
            params=key_format.params,
            key_value=os.urandom(key_format.key_size),
        )

    def build_primitive(self, key: HmacKey) -> Hmac:
        return Hmac(key.params.hash, key.key_value, key.params.tag_size)
