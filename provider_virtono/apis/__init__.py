"""All API groups served by the provider."""

from provider_virtono.apis.compute import v1alpha1 as compute_v1alpha1
from provider_virtono.runtime.scheme import Scheme

ADD_TO_SCHEMES = [
    compute_v1alpha1.add_to_scheme,
]


def add_to_scheme(scheme: Scheme) -> None:
    """Register every API group with ``scheme``."""
    for add in ADD_TO_SCHEMES:
        add(scheme)
