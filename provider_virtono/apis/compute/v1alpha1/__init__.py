"""Compute v1alpha1 API: Virtono virtual machines."""

from provider_virtono.apis.compute.v1alpha1.groupversion_info import (
    GROUP,
    SCHEME_GROUP_VERSION,
    VERSION,
    add_to_scheme,
)
from provider_virtono.apis.compute.v1alpha1.virtualmachine_types import (
    BIOS,
    SSHOptions,
    Virtualization,
    VirtualMachine,
    VirtualMachineList,
    VirtualMachineObservation,
    VirtualMachineParameters,
    VirtualMachineSpec,
    VirtualMachineStatus,
    VIRTUAL_MACHINE_GROUP_KIND,
    VIRTUAL_MACHINE_GROUP_VERSION_KIND,
    VIRTUAL_MACHINE_KIND,
    VIRTUAL_MACHINE_KIND_API_VERSION,
)
from provider_virtono.apis.compute.v1alpha1.validation import (
    validate_parameters,
    validate_virtual_machine,
)

__all__ = [
    "GROUP",
    "VERSION",
    "SCHEME_GROUP_VERSION",
    "add_to_scheme",
    "BIOS",
    "SSHOptions",
    "Virtualization",
    "VirtualMachine",
    "VirtualMachineList",
    "VirtualMachineObservation",
    "VirtualMachineParameters",
    "VirtualMachineSpec",
    "VirtualMachineStatus",
    "VIRTUAL_MACHINE_GROUP_KIND",
    "VIRTUAL_MACHINE_GROUP_VERSION_KIND",
    "VIRTUAL_MACHINE_KIND",
    "VIRTUAL_MACHINE_KIND_API_VERSION",
    "validate_parameters",
    "validate_virtual_machine",
]
