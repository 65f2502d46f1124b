"""
AES-GCM Key Manager

Uses AES in Galois/Counter Mode (GCM) which provides:
- Confidentiality (encryption)
- Integrity (authentication tag)
- Authentication (AEAD)

Ciphertext layout: nonce (12) + ciphertext + tag (16).
"""

import os

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from keyset.messages import KeyMessage
from registry.exceptions import InvalidKeyError, TemplateFormatError
from registry.key_manager import MessageKeyManager


AES_GCM_TYPE_URL = "type.googleapis.com/google.crypto.tink.AesGcmKey"

NONCE_SIZE = 12
TAG_SIZE = 16
KEY_SIZES = (16, 32)


class AesGcmKeyFormat(KeyMessage):
    key_size: int
    version: int = 0


class AesGcmKey(KeyMessage):
    version: int = 0
    key_value: bytes


class AesGcm:
    """AES-GCM AEAD primitive."""

    def __init__(self, key: bytes):
        if len(key) not in KEY_SIZES:
            raise ValueError(f"Key must be one of {KEY_SIZES} bytes, got {len(key)}")
        self.key = key
        self._aesgcm = AESGCM(key)

    def encrypt(self, plaintext: bytes, associated_data: bytes = b"") -> bytes:
        """
        Encrypt and return combined output (nonce + ciphertext + tag).

        Args:
            plaintext: Data to encrypt
            associated_data: Optional additional authenticated data
        """
        nonce = os.urandom(NONCE_SIZE)
        return nonce + self._aesgcm.encrypt(nonce, plaintext, associated_data)

    def decrypt(self, ciphertext: bytes, associated_data: bytes = b"") -> bytes:
        """
        Decrypt combined output (nonce + ciphertext + tag).

        Raises:
            ValueError: If the input is too short
            cryptography.exceptions.InvalidTag: If authentication fails
        """
        if len(ciphertext) < NONCE_SIZE + TAG_SIZE:
            raise ValueError("Ciphertext too short")
        nonce = ciphertext[:NONCE_SIZE]
        return self._aesgcm.decrypt(nonce, ciphertext[NONCE_SIZE:], associated_data)


class AesGcmKeyManager(MessageKeyManager):
    key_message = AesGcmKey
    format_message = AesGcmKeyFormat

    @property
    def type_url(self) -> str:
        return AES_GCM_TYPE_URL

    def validate_key_format(self, key_format: AesGcmKeyFormat) -> None:
        if key_format.key_size not in KEY_SIZES:
            raise TemplateFormatError(
                f"Invalid AES-GCM key size {key_format.key_size}", type_url=self.type_url
            )

    def validate_key(self, key: AesGcmKey) -> None:
        if len(key.key_value) not in KEY_SIZES:
            raise InvalidKeyError(
                f"Invalid AES-GCM key size {len(key.key_value)}", type_url=self.type_url
            )

    def generate_key(self, key_format: AesGcmKeyFormat) -> AesGcmKey:
        return AesGcmKey(version=0, key_value=os.urandom(key_format.key_size))

    def build_primitive(self, key: AesGcmKey) -> AesGcm:
        return AesGcm(key.key_value)
