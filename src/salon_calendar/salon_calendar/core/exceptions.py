class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class SettingsError(DomainError):
    """Raised when the settings store cannot be read or written."""
