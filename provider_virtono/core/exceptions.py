"""Custom exceptions for the application."""

from typing import List, Tuple


class ProviderVirtonoError(Exception):
    """Base class for all provider errors."""

    def __init__(self, detail: str = "Provider error"):
        super().__init__(detail)
        self.detail = detail


class RegistrationConflictError(ProviderVirtonoError):
    """Exception raised when a kind is registered twice with different types."""

    def __init__(self, detail: str = "Kind already registered"):
        super().__init__(detail)


class UnknownKindError(ProviderVirtonoError):
    """Exception raised when decoding an object whose kind is not registered."""

    def __init__(self, detail: str = "Kind not registered"):
        super().__init__(detail)


class SchemaViolationError(ProviderVirtonoError):
    """Exception raised when a resource breaks a cross-field rule.

    ``errors`` holds one ``(field_path, message)`` pair per violation.
    """

    def __init__(self, errors: List[Tuple[str, str]]):
        self.errors = list(errors)
        detail = "; ".join(f"{path}: {message}" for path, message in self.errors)
        super().__init__(detail or "Schema violation")
