"""
Primitive Factory

Builds live primitives from serialized keys, either raw or wrapped in
KeyData.
"""

from typing import Any, Optional

from keyset.models import KeyData
from .default import resolve
from .exceptions import InvalidArgumentError
from .registry import Registry


def primitive_from_key_data(key_data: Optional[KeyData], registry: Optional[Registry] = None) -> Any:
    """
    Build a primitive from key-data.

    Raises:
        InvalidArgumentError: If key_data is None
        NotFoundError: If key_data.type_url is not registered
        InvalidKeyError: If the manager cannot parse key_data.value
    """
    if key_data is None:
        raise InvalidArgumentError("Key data must not be None")
    manager = resolve(registry).get(key_data.type_url)
    return manager.primitive(key_data.value)


def primitive(type_url: str, serialized_key: Optional[bytes], registry: Optional[Registry] = None) -> Any:
    """
    Build a primitive from serialized key bytes.

    Raises:
        InvalidArgumentError: If serialized_key is None or empty
        NotFoundError: If type_url is not registered
        InvalidKeyError: If the bytes do not parse under type_url's manager
    """
    if not serialized_key:
        raise InvalidArgumentError("Serialized key must not be empty", type_url=type_url)
    manager = resolve(registry).get(type_url)
    return manager.primitive(serialized_key)
