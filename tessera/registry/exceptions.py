"""
Registry Exceptions
"""

from typing import Optional


class TesseraError(Exception):
    """Base exception for registry and keyset failures."""

    def __init__(
        self,
        message: str,
        type_url: Optional[str] = None,
        key_id: Optional[int] = None,
    ):
        super().__init__(message)
        self.type_url = type_url
        self.key_id = key_id


class InvalidArgumentError(TesseraError):
    """A required input is absent or empty."""
    pass


class NotFoundError(TesseraError):
    """No key manager is registered for the type URL."""
    pass


class TemplateFormatError(TesseraError):
    """Key template bytes do not parse as the claimed format."""
    pass


class InvalidKeyError(TesseraError):
    """Key bytes do not parse as, or validate against, the claimed key type."""
    pass


class InvalidPrimaryKeyError(TesseraError):
    """The keyset has zero or several enabled keys at the primary id."""
    pass


class RegistrationConflictError(TesseraError):
    """A different key manager was registered for a bound type URL in strict mode."""
    pass


class KeysetStateError(InvalidArgumentError):
    """An illegal key status transition was requested."""
    pass
