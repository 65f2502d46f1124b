import pytest

import aead
import mac
from aead import AES_GCM_TYPE_URL, AesGcmKey, AesGcmKeyFormat
from keyset import KeyMaterialType, KeyTemplate
from mac import HMAC_TYPE_URL, HashType, HmacKey
from registry import (
    InvalidArgumentError,
    NotFoundError,
    TemplateFormatError,
    new_key,
    new_key_data,
)


class TestNewKeyData:

    def test_hmac_key_data(self, full_registry):
        key_data = new_key_data(mac.hmac_sha256_tag128_key_template(), full_registry)
        assert key_data.type_url == HMAC_TYPE_URL
        assert key_data.key_material_type == KeyMaterialType.SYMMETRIC
        key = HmacKey.parse(key_data.value)
        assert key.params.hash == HashType.SHA256
        assert key.params.tag_size == 16
        assert len(key.key_value) == 32

    def test_aes_key_data_size_matches_template(self, full_registry):
        template = aead.aes256_gcm_key_template()
        key_data = new_key_data(template, full_registry)
        assert key_data.type_url == template.type_url
        key = AesGcmKey.parse(key_data.value)
        assert len(key.key_value) == AesGcmKeyFormat.parse(template.value).key_size

    def test_none_template(self, full_registry):
        with pytest.raises(InvalidArgumentError):
            new_key_data(None, full_registry)

    def test_unregistered_type_url(self, full_registry, unregistered_template):
        with pytest.raises(NotFoundError):
            new_key_data(unregistered_template, full_registry)

    def test_malformed_format(self, full_registry):
        template = KeyTemplate(type_url=AES_GCM_TYPE_URL, value=b"\x00")
        with pytest.raises(TemplateFormatError) as exc_info:
            new_key_data(template, full_registry)
        assert exc_info.value.type_url == AES_GCM_TYPE_URL

    def test_unsupported_key_size(self, full_registry):
        with pytest.raises(TemplateFormatError, match="key size"):
            new_key_data(aead.aes_gcm_key_template(24), full_registry)

    def test_hmac_tag_too_large(self, full_registry):
        template = mac.hmac_key_template(32, 64, HashType.SHA256)
        with pytest.raises(TemplateFormatError, match="digest size"):
            new_key_data(template, full_registry)

    def test_hmac_key_size_too_large(self, full_registry):
        template = mac.hmac_key_template(2**70, 16, HashType.SHA256)
        with pytest.raises(TemplateFormatError, match="maximum") as exc_info:
            new_key_data(template, full_registry)
        assert exc_info.value.type_url == HMAC_TYPE_URL

    def test_keys_are_random(self, full_registry):
        template = aead.aes128_gcm_key_template()
        values = {new_key_data(template, full_registry).value for _ in range(20)}
        assert len(values) == 20


class TestNewKey:

    def test_aes128_key_matches_template(self, full_registry):
        template = aead.aes128_gcm_key_template()
        key = new_key(template, full_registry)
        assert isinstance(key, AesGcmKey)
        assert len(key.key_value) == AesGcmKeyFormat.parse(template.value).key_size

    def test_none_template(self, full_registry):
        with pytest.raises(InvalidArgumentError):
            new_key(None, full_registry)

    def test_unregistered_type_url(self, full_registry, unregistered_template):
        with pytest.raises(NotFoundError):
            new_key(unregistered_template, full_registry)

    def test_format_of_other_type_rejected(self, full_registry):
        template = KeyTemplate(
            type_url=AES_GCM_TYPE_URL,
            value=mac.hmac_sha256_tag128_key_template().value,
        )
        with pytest.raises(TemplateFormatError):
            new_key(template, full_registry)
