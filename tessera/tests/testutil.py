from keyset.handle import KeysetHandle, create_key, create_keyset
from keyset.models import KeyData, KeyMaterialType, KeyStatus, OutputPrefixType
from aead.aes_gcm import AES_GCM_TYPE_URL
from registry.exceptions import InvalidKeyError
from registry.key_manager import KeyManager


class DummyAead:
    """AEAD stand-in that is observably distinct from the real primitives."""

    def __init__(self, serialized_key: bytes):
        self.serialized_key = serialized_key

    def encrypt(self, plaintext: bytes, associated_data: bytes = b"") -> bytes:
        return b"dummy" + plaintext

    def decrypt(self, ciphertext: bytes, associated_data: bytes = b"") -> bytes:
        return ciphertext[len(b"dummy"):]


class DummyAeadKeyManager(KeyManager):
    """Key manager claiming the AES-GCM type URL."""

    def __init__(self):
        self.calls = 0

    @property
    def type_url(self) -> str:
        return AES_GCM_TYPE_URL

    def new_key(self, serialized_format: bytes):
        return b"dummy-key"

    def new_key_data(self, serialized_format: bytes) -> KeyData:
        return KeyData(
            type_url=self.type_url,
            value=b"dummy-key",
            key_material_type=KeyMaterialType.SYMMETRIC,
        )

    def primitive(self, serialized_key: bytes) -> DummyAead:
        if not serialized_key:
            raise InvalidKeyError("Empty key", type_url=self.type_url)
        self.calls += 1
        return DummyAead(serialized_key)


def keyset_handle(primary_key_id, *keys):
    """Build a handle from (key_data, status, key_id) tuples."""
    return KeysetHandle(create_keyset(primary_key_id, [
        create_key(key_data, status, key_id, OutputPrefixType.TINK)
        for key_data, status, key_id in keys
    ]))


ENABLED = KeyStatus.ENABLED
DISABLED = KeyStatus.DISABLED
DESTROYED = KeyStatus.DESTROYED
