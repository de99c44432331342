"""Tests for object metadata and identity value types."""

import pytest

from provider_virtono.runtime.meta import (
    GroupKind,
    GroupVersion,
    GroupVersionKind,
    ListMeta,
    ObjectMeta,
    parse_group_version,
)


def test_group_version_str() -> None:
    assert str(GroupVersion("example.org", "v1")) == "example.org/v1"
    assert str(GroupVersion("", "v1")) == "v1"


def test_group_kind_str() -> None:
    assert str(GroupKind("example.org", "Widget")) == "Widget.example.org"
    assert str(GroupKind("", "Pod")) == "Pod"


def test_group_version_kind_parts() -> None:
    gvk = GroupVersion("example.org", "v1").with_kind("Widget")

    assert gvk == GroupVersionKind("example.org", "v1", "Widget")
    assert gvk.group_version() == GroupVersion("example.org", "v1")
    assert gvk.group_kind() == GroupKind("example.org", "Widget")


@pytest.mark.parametrize(
    "api_version,expected",
    [
        ("example.org/v1", GroupVersion("example.org", "v1")),
        ("v1", GroupVersion("", "v1")),
    ],
)
def test_parse_group_version(api_version, expected) -> None:
    assert parse_group_version(api_version) == expected


@pytest.mark.parametrize("api_version", ["", "a/b/c"])
def test_parse_group_version_invalid(api_version) -> None:
    with pytest.raises(ValueError):
        parse_group_version(api_version)


def test_object_meta_wire_format() -> None:
    """Test metadata round trips and ignores server-managed extras."""
    data = {
        "name": "vm1",
        "uid": "8f7c",
        "resourceVersion": "12",
        "generation": 3,
        "creationTimestamp": "2024-01-01T00:00:00Z",
        "annotations": {"crossplane.io/external-name": "12345"},
        "finalizers": ["finalizer.managedresource.crossplane.io"],
    }
    meta = ObjectMeta.model_validate({**data, "managedFields": []})

    assert meta.generation == 3
    assert meta.to_dict() == data


def test_list_meta_continue_alias() -> None:
    meta = ListMeta.model_validate({"continue": "abc", "remainingItemCount": 4})

    assert meta.continue_ == "abc"
    assert meta.to_dict() == {"continue": "abc", "remainingItemCount": 4}
