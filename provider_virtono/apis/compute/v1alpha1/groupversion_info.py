"""Group and version of the compute v1alpha1 API."""

from provider_virtono.runtime.meta import GroupVersion
from provider_virtono.runtime.scheme import SchemeBuilder

GROUP = "compute.virtono.crossplane.io"
VERSION = "v1alpha1"

SCHEME_GROUP_VERSION = GroupVersion(GROUP, VERSION)

SCHEME_BUILDER = SchemeBuilder(SCHEME_GROUP_VERSION)

add_to_scheme = SCHEME_BUILDER.add_to_scheme
