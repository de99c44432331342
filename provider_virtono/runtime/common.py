"""Provider-agnostic spec and status fields of managed resources."""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from provider_virtono.runtime.meta import WireModel


class DeletionPolicy(str, Enum):
    """What happens to the external resource when the managed resource is deleted."""

    ORPHAN = "Orphan"
    DELETE = "Delete"


class ConditionType(str, Enum):
    """Well-known condition types."""

    READY = "Ready"
    SYNCED = "Synced"


class ConditionReason(str, Enum):
    """Well-known condition reasons."""

    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"
    CREATING = "Creating"
    DELETING = "Deleting"
    RECONCILE_SUCCESS = "ReconcileSuccess"
    RECONCILE_ERROR = "ReconcileError"
    RECONCILE_PAUSED = "ReconcilePaused"


class ConditionStatus(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class Reference(WireModel):
    """Reference to another cluster-scoped object by name."""

    name: str


class SecretReference(WireModel):
    """Reference to a secret in a namespace."""

    name: str
    namespace: str


class ConnectionSecretMetadata(WireModel):
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    type: Optional[str] = None


class PublishConnectionDetailsTo(WireModel):
    """Where and how connection details are published."""

    name: str
    config_ref: Optional[Reference] = Field(default=None, alias="configRef")
    metadata: Optional[ConnectionSecretMetadata] = None


class ResourceSpec(WireModel):
    """Fields common to the spec of every managed resource."""

    write_connection_secret_to_ref: Optional[SecretReference] = Field(
        default=None,
        alias="writeConnectionSecretToRef",
        description="Secret the connection details are written to",
    )
    publish_connection_details_to: Optional[PublishConnectionDetailsTo] = Field(
        default=None,
        alias="publishConnectionDetailsTo",
        description="Secret store the connection details are published to",
    )
    provider_config_ref: Reference = Field(
        default_factory=lambda: Reference(name="default"),
        alias="providerConfigRef",
        description="ProviderConfig used to connect to the provider",
    )
    deletion_policy: DeletionPolicy = Field(
        default=DeletionPolicy.DELETE,
        alias="deletionPolicy",
        description="Whether the external resource is deleted with the managed resource",
    )


class Condition(WireModel):
    """An observation of one aspect of a resource's lifecycle."""

    type: str
    status: ConditionStatus
    last_transition_time: Optional[datetime] = Field(
        default=None, alias="lastTransitionTime"
    )
    reason: str = ""
    message: Optional[str] = None

    def equal(self, other: "Condition") -> bool:
        """Compare two conditions, ignoring the transition time."""
        return (
            self.type == other.type
            and self.status == other.status
            and self.reason == other.reason
            and self.message == other.message
        )

    def with_message(self, message: str) -> "Condition":
        return self.model_copy(update={"message": message})


class ResourceStatus(WireModel):
    """Fields common to the status of every managed resource."""

    conditions: List[Condition] = Field(default_factory=list)

    def get_condition(self, condition_type: str) -> Condition:
        """Return the condition of the given type.

        A condition that has never been set is reported as Unknown.
        """
        for condition in self.conditions:
            if condition.type == condition_type:
                return condition
        if isinstance(condition_type, Enum):
            condition_type = condition_type.value
        return Condition(type=condition_type, status=ConditionStatus.UNKNOWN)

    def set_conditions(self, *conditions: Condition) -> None:
        """Set the supplied conditions, replacing any of the same type.

        A condition equal to the existing one is left untouched so that its
        transition time is preserved.
        """
        for new in conditions:
            for i, existing in enumerate(self.conditions):
                if existing.type != new.type:
                    continue
                if not existing.equal(new):
                    self.conditions[i] = new
                break
            else:
                self.conditions.append(new)


def _condition(
    condition_type: ConditionType,
    status: ConditionStatus,
    reason: ConditionReason,
    message: Optional[str] = None,
) -> Condition:
    return Condition(
        type=condition_type.value,
        status=status,
        last_transition_time=datetime.now(timezone.utc),
        reason=reason.value,
        message=message,
    )


def available() -> Condition:
    """The external resource is available for use."""
    return _condition(
        ConditionType.READY, ConditionStatus.TRUE, ConditionReason.AVAILABLE
    )


def unavailable() -> Condition:
    """The external resource exists but is not available for use."""
    return _condition(
        ConditionType.READY, ConditionStatus.FALSE, ConditionReason.UNAVAILABLE
    )


def creating() -> Condition:
    """The external resource is being created."""
    return _condition(
        ConditionType.READY, ConditionStatus.FALSE, ConditionReason.CREATING
    )


def deleting() -> Condition:
    """The external resource is being deleted."""
    return _condition(
        ConditionType.READY, ConditionStatus.FALSE, ConditionReason.DELETING
    )


def reconcile_success() -> Condition:
    """The last reconciliation succeeded."""
    return _condition(
        ConditionType.SYNCED, ConditionStatus.TRUE, ConditionReason.RECONCILE_SUCCESS
    )


def reconcile_error(error: Exception) -> Condition:
    """The last reconciliation failed with ``error``."""
    return _condition(
        ConditionType.SYNCED,
        ConditionStatus.FALSE,
        ConditionReason.RECONCILE_ERROR,
        message=str(error),
    )


def reconcile_paused() -> Condition:
    """Reconciliation is paused."""
    return _condition(
        ConditionType.SYNCED, ConditionStatus.FALSE, ConditionReason.RECONCILE_PAUSED
    )
