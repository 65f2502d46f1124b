"""
Key Manager Interface

A key manager is the algorithm plugin for one type URL: it generates
keys and key-data from templates and builds primitives from serialized
keys. The registry and builder dispatch only through this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Type

from keyset.messages import KeyMessage
from keyset.models import KeyData, KeyMaterialType
from .exceptions import InvalidKeyError, TemplateFormatError


class KeyManager(ABC):
    """Abstract base class for algorithm key managers."""

    @property
    @abstractmethod
    def type_url(self) -> str:
        """The type URL this manager handles."""
        pass

    def supports(self, type_url: str) -> bool:
        return type_url == self.type_url

    @abstractmethod
    def new_key(self, serialized_format: bytes) -> Any:
        """
        Generate a new key from a serialized key format.

        Raises:
            TemplateFormatError: If the format is malformed
        """
        pass

    @abstractmethod
    def new_key_data(self, serialized_format: bytes) -> KeyData:
        """
        Generate a new key and wrap it in KeyData.

        Raises:
            TemplateFormatError: If the format is malformed
        """
        pass

    @abstractmethod
    def primitive(self, serialized_key: bytes) -> Any:
        """
        Build a live primitive from serialized key bytes.

        Raises:
            InvalidKeyError: If the bytes are empty or are not a valid key
        """
        pass


class MessageKeyManager(KeyManager):
    """
    Partial key manager for keys stored as KeyMessage JSON.

    Subclasses declare the message classes and supply generation,
    validation and primitive construction.
    """

    key_message: ClassVar[Type[KeyMessage]]
    format_message: ClassVar[Type[KeyMessage]]
    key_material_type: ClassVar[KeyMaterialType] = KeyMaterialType.SYMMETRIC
    max_version: ClassVar[int] = 0

    def new_key(self, serialized_format: bytes) -> KeyMessage:
        if not serialized_format:
            raise TemplateFormatError("Empty key format", type_url=self.type_url)
        try:
            key_format = self.format_message.parse(serialized_format)
        except ValueError as e:
            raise TemplateFormatError(
                f"Invalid {self.format_message.__name__}", type_url=self.type_url
            ) from e
        self.validate_key_format(key_format)
        return self.generate_key(key_format)

    def new_key_data(self, serialized_format: bytes) -> KeyData:
        key = self.new_key(serialized_format)
        return KeyData(
            type_url=self.type_url,
            value=key.serialize(),
            key_material_type=self.key_material_type,
        )

    def primitive(self, serialized_key: bytes) -> Any:
        if not serialized_key:
            raise InvalidKeyError("Empty key", type_url=self.type_url)
        try:
            key = self.key_message.parse(serialized_key)
        except ValueError as e:
            raise InvalidKeyError(
                f"Invalid {self.key_message.__name__}", type_url=self.type_url
            ) from e
        version = getattr(key, "version", 0)
        if version > self.max_version:
            raise InvalidKeyError(
                f"Key version {version} is newer than supported {self.max_version}",
                type_url=self.type_url,
            )
        self.validate_key(key)
        return self.build_primitive(key)

    @abstractmethod
    def generate_key(self, key_format: KeyMessage) -> KeyMessage:
        pass

    @abstractmethod
    def build_primitive(self, key: KeyMessage) -> Any:
        pass

    def validate_key_format(self, key_format: KeyMessage) -> None:
        """Raise TemplateFormatError if the format is unacceptable."""
        pass

    def validate_key(self, key: KeyMessage) -> None:
        """Raise InvalidKeyError if the key is unacceptable."""
        pass
