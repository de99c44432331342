"""Object metadata and type identity shared by all resources."""

from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for every model that is stored or sent on the wire.

    Attributes are snake_case in Python; the wire keys are the aliases.
    Unset optional fields are omitted on encode.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_dict(self) -> Dict[str, Any]:
        """Encode to a JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Encode to a JSON string keyed by wire names."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class GroupVersion(NamedTuple):
    """API group and version, e.g. compute.virtono.crossplane.io/v1alpha1."""

    group: str
    version: str

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def with_kind(self, kind: str) -> "GroupVersionKind":
        return GroupVersionKind(self.group, self.version, kind)


class GroupKind(NamedTuple):
    """API group and kind."""

    group: str
    kind: str

    def __str__(self) -> str:
        if not self.group:
            return self.kind
        return f"{self.kind}.{self.group}"


class GroupVersionKind(NamedTuple):
    """Full identity of a resource type."""

    group: str
    version: str
    kind: str

    def __str__(self) -> str:
        return f"{self.group}/{self.version}, Kind={self.kind}"

    def group_version(self) -> GroupVersion:
        return GroupVersion(self.group, self.version)

    def group_kind(self) -> GroupKind:
        return GroupKind(self.group, self.kind)


def parse_group_version(api_version: str) -> GroupVersion:
    """Parse an apiVersion string ("group/version" or "version")."""
    if not api_version:
        raise ValueError("apiVersion must not be empty")
    if api_version.count("/") > 1:
        raise ValueError(f"unexpected apiVersion format: {api_version}")
    if "/" not in api_version:
        return GroupVersion("", api_version)
    group, version = api_version.split("/")
    return GroupVersion(group, version)


class TypeIdentity(NamedTuple):
    """Derived identity strings of a kind."""

    kind: str
    group_kind: str
    kind_api_version: str
    group_version_kind: GroupVersionKind


@lru_cache(maxsize=None)
def type_identity(kind: str, group_version: GroupVersion) -> TypeIdentity:
    """Compute the identity of ``kind`` in ``group_version``.

    Pure and cached, so every caller in the process sees the same values.
    """
    return TypeIdentity(
        kind=kind,
        group_kind=str(GroupKind(group_version.group, kind)),
        kind_api_version=f"{kind}.{group_version}",
        group_version_kind=group_version.with_kind(kind),
    )


class ObjectMeta(WireModel):
    """Metadata carried by every persisted resource."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    namespace: Optional[str] = None
    uid: Optional[str] = None
    resource_version: Optional[str] = Field(default=None, alias="resourceVersion")
    generation: Optional[int] = None
    creation_timestamp: Optional[datetime] = Field(
        default=None, alias="creationTimestamp"
    )
    deletion_timestamp: Optional[datetime] = Field(
        default=None, alias="deletionTimestamp"
    )
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    finalizers: Optional[List[str]] = None


class ListMeta(WireModel):
    """Metadata carried by list responses."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    resource_version: Optional[str] = Field(default=None, alias="resourceVersion")
    continue_: Optional[str] = Field(default=None, alias="continue")
    remaining_item_count: Optional[int] = Field(
        default=None, alias="remainingItemCount"
    )
