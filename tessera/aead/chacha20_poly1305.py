"""
ChaCha20-Poly1305 and XChaCha20-Poly1305 Key Managers

Both use 256-bit keys. ChaCha20-Poly1305 (RFC 8439) takes a 12-byte
nonce; XChaCha20-Poly1305 extends it to 24 bytes so random nonces are
safe for very large message counts.
"""

import os

from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305
from nacl import bindings

from keyset.messages import KeyMessage
from registry.exceptions import InvalidKeyError
from registry.key_manager import MessageKeyManager


CHACHA20_POLY1305_TYPE_URL = "type.googleapis.com/google.crypto.tink.ChaCha20Poly1305Key"
XCHACHA20_POLY1305_TYPE_URL = "type.googleapis.com/google.crypto.tink.XChaCha20Poly1305Key"

KEY_SIZE = 32
NONCE_SIZE = 12
XNONCE_SIZE = 24
TAG_SIZE = 16


class ChaCha20Poly1305KeyFormat(KeyMessage):
    pass


class ChaCha20Poly1305Key(KeyMessage):
    version: int = 0
    key_value: bytes


class XChaCha20Poly1305KeyFormat(KeyMessage):
    version: int = 0


class XChaCha20Poly1305Key(KeyMessage):
    version: int = 0
    key_value: bytes


class ChaCha20Poly1305Aead:
    """ChaCha20-Poly1305 AEAD primitive; output is nonce + ciphertext + tag."""

    def __init__(self, key: bytes):
        if len(key) != KEY_SIZE:
            raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
        self.key = key
        self._cipher = ChaCha20Poly1305(key)

    def encrypt(self, plaintext: bytes, associated_data: bytes = b"") -> bytes:
        nonce = os.urandom(NONCE_SIZE)
        return nonce + self._cipher.encrypt(nonce, plaintext, associated_data)

    def decrypt(self, ciphertext: bytes, associated_data: bytes = b"") -> bytes:
        if len(ciphertext) < NONCE_SIZE + TAG_SIZE:
            raise ValueError("Ciphertext too short")
        return self._cipher.decrypt(ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:], associated_data)


class XChaCha20Poly1305Aead:
    """XChaCha20-Poly1305 AEAD primitive; output is nonce + ciphertext + tag."""

    def __init__(self, key: bytes):
        if len(key) != KEY_SIZE:
            raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
        self.key = key

    def encrypt(self, plaintext: bytes, associated_data: bytes = b"") -> bytes:
        nonce = os.urandom(XNONCE_SIZE)
        return nonce + bindings.crypto_aead_xchacha20poly1305_ietf_encrypt(
            plaintext, associated_data or None, nonce, self.key
        )

    def decrypt(self, ciphertext: bytes, associated_data: bytes = b"") -> bytes:
        """
        Raises:
            ValueError: If the input is too short
            nacl.exceptions.CryptoError: If authentication fails
        """
        if len(ciphertext) < XNONCE_SIZE + TAG_SIZE:
            raise ValueError("Ciphertext too short")
        return bindings.crypto_aead_xchacha20poly1305_ietf_decrypt(
            ciphertext[XNONCE_SIZE:], associated_data or None, ciphertext[:XNONCE_SIZE], self.key
        )


class ChaCha20Poly1305KeyManager(MessageKeyManager):
    key_message = ChaCha20Poly1305Key
    format_message = ChaCha20Poly1305KeyFormat

    @property
    def type_url(self) -> str:
        return CHACHA20_POLY1305_TYPE_URL

    def validate_key(self, key: ChaCha20Poly1305Key) -> None:
        if len(key.key_value) != KEY_SIZE:
            raise InvalidKeyError(
                f"Invalid ChaCha20-Poly1305 key size {len(key.key_value)}", type_url=self.type_url
            )

    def generate_key(self, key_format: ChaCha20Poly1305KeyFormat) -> ChaCha20Poly1305Key:
        return ChaCha20Poly1305Key(version=0, key_value=os.urandom(KEY_SIZE))

    def build_primitive(self, key: ChaCha20Poly1305Key) -> ChaCha20Poly1305Aead:
        return ChaCha20Poly1305Aead(key.key_value)


class XChaCha20Poly1305KeyManager(MessageKeyManager):
    key_message = XChaCha20Poly1305Key
    format_message = XChaCha20Poly1305KeyFormat

    @property
    def type_url(self) -> str:
        return XCHACHA20_POLY1305_TYPE_URL

    def validate_key(self, key: XChaCha20Poly1305Key) -> None:
        if len(key.key_value) != KEY_SIZE:
            raise InvalidKeyError(
                f"Invalid XChaCha20-Poly1305 key size {len(key.key_value)}", type_url=self.type_url
            )

    def generate_key(self, key_format: XChaCha20Poly1305KeyFormat) -> XChaCha20Poly1305Key:
        return XChaCha20Poly1305Key(version=0, key_value=os.urandom(KEY_SIZE))

    def build_primitive(self, key: XChaCha20Poly1305Key) -> XChaCha20Poly1305Aead:
        return XChaCha20Poly1305Aead(key.key_value)
