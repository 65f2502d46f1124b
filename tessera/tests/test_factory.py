from dataclasses import replace

import pytest

import aead
from aead import AES_GCM_TYPE_URL, AesGcm, AesGcmKey
from mac import HMAC_TYPE_URL, Hmac
from registry import (
    InvalidArgumentError,
    InvalidKeyError,
    NotFoundError,
    primitive,
    primitive_from_key_data,
)


class TestPrimitiveFromKeyData:

    def test_hmac_key_data(self, full_registry, hmac_key_data):
        p = primitive_from_key_data(hmac_key_data, full_registry)
        assert isinstance(p, Hmac)
        assert len(p.compute_mac(b"data")) == 16

    def test_unregistered_type_url(self, full_registry, hmac_key_data):
        key_data = replace(hmac_key_data, type_url="some url")
        with pytest.raises(NotFoundError):
            primitive_from_key_data(key_data, full_registry)

    def test_foreign_payload_rejected(self, full_registry, hmac_key_data):
        key_data = replace(hmac_key_data, type_url=AES_GCM_TYPE_URL)
        with pytest.raises(InvalidKeyError) as exc_info:
            primitive_from_key_data(key_data, full_registry)
        assert exc_info.value.type_url == AES_GCM_TYPE_URL

    def test_none_key_data(self, full_registry):
        with pytest.raises(InvalidArgumentError):
            primitive_from_key_data(None, full_registry)


class TestPrimitive:

    def test_hmac_key(self, full_registry, hmac_key_data):
        p = primitive(HMAC_TYPE_URL, hmac_key_data.value, full_registry)
        assert isinstance(p, Hmac)

    def test_aes_key(self, full_registry, aes256_key_data, sample_plaintext):
        p = primitive(AES_GCM_TYPE_URL, aes256_key_data.value, full_registry)
        assert isinstance(p, AesGcm)
        assert len(p.key) == 32
        assert p.decrypt(p.encrypt(sample_plaintext, b"aad"), b"aad") == sample_plaintext

    def test_unregistered_type_url(self, full_registry, hmac_key_data):
        with pytest.raises(NotFoundError):
            primitive("some url", hmac_key_data.value, full_registry)

    def test_unmatched_type_url(self, full_registry, hmac_key_data):
        with pytest.raises(InvalidKeyError):
            primitive(AES_GCM_TYPE_URL, hmac_key_data.value, full_registry)

    @pytest.mark.parametrize("serialized_key", [None, b""])
    def test_void_key(self, full_registry, serialized_key):
        with pytest.raises(InvalidArgumentError):
            primitive(AES_GCM_TYPE_URL, serialized_key, full_registry)

    def test_garbage_key(self, full_registry):
        with pytest.raises(InvalidKeyError):
            primitive(AES_GCM_TYPE_URL, b"\x00", full_registry)

    def test_invalid_key_size(self, full_registry):
        serialized = AesGcmKey(key_value=b"\x01" * 20).serialize()
        with pytest.raises(InvalidKeyError, match="key size"):
            primitive(AES_GCM_TYPE_URL, serialized, full_registry)

    def test_future_key_version(self, full_registry):
        serialized = AesGcmKey(version=1, key_value=b"\x01" * 16).serialize()
        with pytest.raises(InvalidKeyError, match="version"):
            primitive(AES_GCM_TYPE_URL, serialized, full_registry)

    def test_chacha_keys(self, full_registry, sample_plaintext):
        from registry import new_key_data
        for template in (aead.chacha20_poly1305_key_template(), aead.xchacha20_poly1305_key_template()):
            key_data = new_key_data(template, full_registry)
            p = primitive_from_key_data(key_data, full_registry)
            assert len(p.key) == 32
            assert p.decrypt(p.encrypt(sample_plaintext)) == sample_plaintext
