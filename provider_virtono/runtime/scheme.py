"""Registry mapping type identity to the model that implements it.

A :class:`Scheme` is populated once, at process start, by calling the
``add_to_scheme`` function of every API group. Afterwards it is only read:
to construct empty objects for a kind, to find the kind of an object, and to
encode and decode objects on the wire.
"""

from typing import Any, Dict, List, Type

from pydantic import BaseModel

from provider_virtono.core.exceptions import RegistrationConflictError, UnknownKindError
from provider_virtono.runtime.meta import (
    GroupVersion,
    GroupVersionKind,
    parse_group_version,
)
from provider_virtono.utils.context import operation_context
from provider_virtono.utils.logger import get_logger

logger = get_logger(__name__)


class Scheme:
    """Process-wide table of known kinds."""

    def __init__(self) -> None:
        self._gvk_to_type: Dict[GroupVersionKind, Type[BaseModel]] = {}
        self._type_to_gvk: Dict[Type[BaseModel], GroupVersionKind] = {}

    def add_known_types(self, group_version: GroupVersion, *types: Type[BaseModel]) -> None:
        """Register each type under its class name as kind."""
        for model in types:
            self.add_known_type_with_name(group_version.with_kind(model.__name__), model)

    def add_known_type_with_name(
        self, gvk: GroupVersionKind, model: Type[BaseModel]
    ) -> None:
        """Register ``model`` as the implementation of ``gvk``.

        Registering the same type again is a no-op. Registering a different
        type for a kind that is already known raises
        :class:`RegistrationConflictError`.
        """
        existing = self._gvk_to_type.get(gvk)
        if existing is model:
            logger.debug("Kind already registered", extra={"kind": str(gvk)})
            return
        if existing is not None:
            raise RegistrationConflictError(
                f"{gvk} is already registered to "
                f"{existing.__module__}.{existing.__qualname__}, "
                f"cannot register {model.__module__}.{model.__qualname__}"
            )
        self._gvk_to_type[gvk] = model
        self._type_to_gvk.setdefault(model, gvk)
        logger.info("Registered kind", extra={"kind": str(gvk)})

    def recognizes(self, gvk: GroupVersionKind) -> bool:
        return gvk in self._gvk_to_type

    def known_types(self, group_version: GroupVersion) -> Dict[str, Type[BaseModel]]:
        """Kinds registered for ``group_version``, keyed by kind name."""
        return {
            gvk.kind: model
            for gvk, model in self._gvk_to_type.items()
            if gvk.group_version() == group_version
        }

    def all_known_types(self) -> List[GroupVersionKind]:
        return sorted(self._gvk_to_type)

    def object_kind(self, obj: BaseModel) -> GroupVersionKind:
        """Return the kind ``obj`` was registered under."""
        gvk = self._type_to_gvk.get(type(obj))
        if gvk is None:
            raise UnknownKindError(f"{type(obj).__qualname__} is not registered")
        return gvk

    def new(self, gvk: GroupVersionKind) -> BaseModel:
        """Construct an empty instance of ``gvk`` to decode into.

        Required fields are left unset rather than defaulted, so the
        result is not a valid object until it has been populated.
        """
        model = self._gvk_to_type.get(gvk)
        if model is None:
            raise UnknownKindError(f"{gvk} is not registered")
        return model.model_construct()

    def decode(self, data: Dict[str, Any]) -> BaseModel:
        """Decode a wire dict, dispatching on its apiVersion and kind."""
        api_version = data.get("apiVersion")
        kind = data.get("kind")
        if not api_version or not kind:
            raise UnknownKindError("object has no apiVersion or kind")
        try:
            gvk = parse_group_version(api_version).with_kind(kind)
        except ValueError as e:
            raise UnknownKindError(str(e)) from e
        model = self._gvk_to_type.get(gvk)
        if model is None:
            raise UnknownKindError(f"{gvk} is not registered")

        name = (data.get("metadata") or {}).get("name")
        with operation_context("scheme.decode", resource_kind=kind, resource_name=name):
            logger.debug("Decoding object")
            return model.model_validate(data)

    def encode(self, obj: BaseModel) -> Dict[str, Any]:
        """Encode ``obj`` to a wire dict with apiVersion and kind set."""
        gvk = self.object_kind(obj)
        data = obj.model_dump(mode="json", by_alias=True, exclude_none=True)
        data["apiVersion"] = str(gvk.group_version())
        data["kind"] = gvk.kind
        return data


class SchemeBuilder:
    """Collects the types of one group version until a scheme is available."""

    def __init__(self, group_version: GroupVersion) -> None:
        self.group_version = group_version
        self._types: List[Type[BaseModel]] = []

    def register(self, *types: Type[BaseModel]) -> None:
        for model in types:
            if model not in self._types:
                self._types.append(model)

    def add_to_scheme(self, scheme: Scheme) -> None:
        """Register every collected type with ``scheme``."""
        scheme.add_known_types(self.group_version, *self._types)
