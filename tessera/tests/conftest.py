import os
import sys
from pathlib import Path

import pytest

source_path = Path(__file__).parent.parent
sys.path.insert(0, str(source_path))
sys.path.insert(0, str(Path(__file__).parent))

os.environ.setdefault("TESSERA_LOG_LEVEL", "DEBUG")


@pytest.fixture
def registry():
    from registry import Registry
    return Registry()


@pytest.fixture
def strict_registry():
    from registry import Registry
    return Registry(strict=True)


@pytest.fixture
def full_registry(registry):
    import aead
    import mac
    mac.register(registry)
    aead.register(registry)
    return registry


@pytest.fixture
def aes128_key_data(full_registry):
    import aead
    from registry import new_key_data
    return new_key_data(aead.aes128_gcm_key_template(), full_registry)


@pytest.fixture
def aes256_key_data(full_registry):
    import aead
    from registry import new_key_data
    return new_key_data(aead.aes256_gcm_key_template(), full_registry)


@pytest.fixture
def hmac_key_data(full_registry):
    import mac
    from registry import new_key_data
    return new_key_data(mac.hmac_sha256_tag128_key_template(), full_registry)


@pytest.fixture
def sample_plaintext():
    return b"Hello, this is a test message for Tessera encryption testing!"


@pytest.fixture
def unregistered_template():
    from keyset import KeyTemplate
    return KeyTemplate(type_url="some url", value=b"\x00")
