"""Accessors shared by every managed resource type."""

from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, List, Optional

from provider_virtono.runtime.common import (
    Condition,
    ConditionType,
    DeletionPolicy,
    PublishConnectionDetailsTo,
    Reference,
    SecretReference,
)
from provider_virtono.runtime.meta import GroupVersion, TypeIdentity, type_identity

EXTERNAL_NAME_ANNOTATION = "crossplane.io/external-name"


def human_duration(seconds: float) -> str:
    """Format an age the way kubectl does (e.g. 45s, 12m, 3h, 20d)."""
    seconds = max(int(seconds), 0)
    if seconds < 120:
        return f"{seconds}s"
    minutes = seconds // 60
    if minutes < 120:
        return f"{minutes}m"
    hours = minutes // 60
    if hours < 48:
        return f"{hours}h"
    return f"{hours // 24}d"


class TypedObject:
    """Class-level identity for a registered type.

    Subclasses set ``group_version``; the kind is the class name.
    """

    group_version: ClassVar[GroupVersion]

    @classmethod
    def identity(cls) -> TypeIdentity:
        return type_identity(cls.__name__, cls.group_version)

    @classmethod
    def kind_name(cls) -> str:
        return cls.identity().kind

    @classmethod
    def api_version_name(cls) -> str:
        return str(cls.group_version)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Decode a wire dict into an instance of this type."""
        return cls.model_validate(data)

    def deep_copy(self):
        return self.model_copy(deep=True)

    def fill_type_meta(self):
        """Set apiVersion and kind from the class identity when unset."""
        if self.api_version is None:
            self.api_version = self.api_version_name()
        if self.kind is None:
            self.kind = self.kind_name()
        return self


class Managed(TypedObject):
    """Generic accessors over ``metadata``, ``spec`` and ``status``."""

    scope: ClassVar[str] = "Cluster"
    plural: ClassVar[str]
    categories: ClassVar[tuple] = ("crossplane", "managed")

    def get_condition(self, condition_type: str) -> Condition:
        return self.status.get_condition(condition_type)

    def set_conditions(self, *conditions: Condition) -> None:
        self.status.set_conditions(*conditions)

    def get_deletion_policy(self) -> DeletionPolicy:
        return self.spec.deletion_policy

    def set_deletion_policy(self, policy: DeletionPolicy) -> None:
        self.spec.deletion_policy = policy

    def get_provider_config_reference(self) -> Reference:
        return self.spec.provider_config_ref

    def set_provider_config_reference(self, ref: Reference) -> None:
        if ref is None:
            raise ValueError("providerConfigRef is required")
        self.spec.provider_config_ref = ref

    def get_write_connection_secret_to_reference(self) -> Optional[SecretReference]:
        return self.spec.write_connection_secret_to_ref

    def set_write_connection_secret_to_reference(
        self, ref: Optional[SecretReference]
    ) -> None:
        self.spec.write_connection_secret_to_ref = ref

    def get_publish_connection_details_to(self) -> Optional[PublishConnectionDetailsTo]:
        return self.spec.publish_connection_details_to

    def set_publish_connection_details_to(
        self, target: Optional[PublishConnectionDetailsTo]
    ) -> None:
        self.spec.publish_connection_details_to = target

    def get_external_name(self) -> Optional[str]:
        """Return the name of the external resource, if known."""
        return (self.metadata.annotations or {}).get(EXTERNAL_NAME_ANNOTATION)

    def set_external_name(self, name: str) -> None:
        annotations = dict(self.metadata.annotations or {})
        annotations[EXTERNAL_NAME_ANNOTATION] = name
        self.metadata.annotations = annotations

    def printer_columns(self, now: Optional[datetime] = None) -> Dict[str, str]:
        """Values of the READY, SYNCED, EXTERNAL-NAME and AGE columns."""
        created = self.metadata.creation_timestamp
        if created is None:
            age = ""
        else:
            if created.tzinfo is None:
                created = created.replace(tzinfo=timezone.utc)
            now = now or datetime.now(timezone.utc)
            if now.tzinfo is None:
                now = now.replace(tzinfo=timezone.utc)
            age = human_duration((now - created).total_seconds())
        return {
            "READY": self.get_condition(ConditionType.READY).status.value,
            "SYNCED": self.get_condition(ConditionType.SYNCED).status.value,
            "EXTERNAL-NAME": self.get_external_name() or "",
            "AGE": age,
        }


class ManagedList(TypedObject):
    """Generic accessors over a list of managed resources."""

    def get_items(self) -> List[Managed]:
        return list(self.items)
