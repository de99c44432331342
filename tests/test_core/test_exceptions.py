"""Tests for custom exceptions."""

from provider_virtono.core.exceptions import (
    ProviderVirtonoError,
    RegistrationConflictError,
    SchemaViolationError,
    UnknownKindError,
)


def test_exception_hierarchy() -> None:
    for exc in [RegistrationConflictError(), UnknownKindError(), SchemaViolationError([])]:
        assert isinstance(exc, ProviderVirtonoError)


def test_default_details() -> None:
    assert RegistrationConflictError().detail == "Kind already registered"
    assert UnknownKindError().detail == "Kind not registered"
    assert SchemaViolationError([]).detail == "Schema violation"


def test_schema_violation_message() -> None:
    """Test every violation appears in the message."""
    exc = SchemaViolationError(
        [
            ("spec.forProvider.existingSSHKeys", "must not be empty"),
            ("spec.forProvider.ram", "must not be negative"),
        ]
    )

    assert len(exc.errors) == 2
    assert str(exc) == (
        "spec.forProvider.existingSSHKeys: must not be empty; "
        "spec.forProvider.ram: must not be negative"
    )
