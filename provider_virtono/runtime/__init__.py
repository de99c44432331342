"""Generic managed-resource runtime shared by every API group."""

from provider_virtono.runtime.common import (
    Condition,
    ConditionReason,
    ConditionStatus,
    ConditionType,
    DeletionPolicy,
    ResourceSpec,
    ResourceStatus,
)
from provider_virtono.runtime.meta import (
    GroupKind,
    GroupVersion,
    GroupVersionKind,
    ListMeta,
    ObjectMeta,
    TypeIdentity,
    type_identity,
)
from provider_virtono.runtime.scheme import Scheme, SchemeBuilder

__all__ = [
    "Condition",
    "ConditionReason",
    "ConditionStatus",
    "ConditionType",
    "DeletionPolicy",
    "ResourceSpec",
    "ResourceStatus",
    "GroupKind",
    "GroupVersion",
    "GroupVersionKind",
    "ListMeta",
    "ObjectMeta",
    "TypeIdentity",
    "type_identity",
    "Scheme",
    "SchemeBuilder",
]
