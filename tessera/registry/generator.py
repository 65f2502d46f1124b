"""
Key and KeyData Generation

Turns a key template into a new key through the manager bound to the
template's type URL.
"""

from typing import Any, Optional

from keyset.models import KeyData, KeyTemplate
from .default import resolve
from .exceptions import InvalidArgumentError
from .registry import Registry


def new_key_data(template: Optional[KeyTemplate], registry: Optional[Registry] = None) -> KeyData:
    """
    Generate new key-data from a template.

    Args:
        template: Key template naming a registered type URL
        registry: Registry to resolve through (default registry if None)

    Returns:
        KeyData whose type_url equals the template's

    Raises:
        InvalidArgumentError: If template is None
        NotFoundError: If the template's type URL is not registered
        TemplateFormatError: If the template value is malformed
    """
    if template is None:
        raise InvalidArgumentError("Key template must not be None")
    manager = resolve(registry).get(template.type_url)
    return manager.new_key_data(template.value)


def new_key(template: Optional[KeyTemplate], registry: Optional[Registry] = None) -> Any:
    """
    Generate a new raw key from a template.

    Same contract as new_key_data, but returns the key itself so callers
    can inspect generated fields.
    """
    if template is None:
        raise InvalidArgumentError("Key template must not be None")
    manager = resolve(registry).get(template.type_url)
    return manager.new_key(template.value)
