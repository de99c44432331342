"""Cross-field rules for VirtualMachine parameters.

Types, required fields and enum domains are checked by the models on
construction. The rules here involve more than one field and are applied
before a resource is handed to the reconciler.
"""

from typing import List, Optional, Tuple, get_args

from provider_virtono.apis.compute.v1alpha1.virtualmachine_types import (
    SSHOptions,
    Virtualization,
    VirtualMachine,
    VirtualMachineParameters,
)
from provider_virtono.config import OpenVZOnlyPolicy, settings
from provider_virtono.core.exceptions import SchemaViolationError
from provider_virtono.utils.context import operation_context
from provider_virtono.utils.logger import get_logger

logger = get_logger(__name__)

OPENVZ_ONLY_FIELDS = ("enable_tuntap", "enable_io_priority")

NON_NEGATIVE_FIELDS = (
    "disk_space",
    "ram",
    "bandwidth",
    "cpu_cores",
    "burstable_ram",
    "swap_ram",
    "cpu",
    "cpu_percent",
    "shadow_memory",
    "num_ipv4",
    "num_internal_ips",
    "num_ipv6",
    "num_ipv6_subnets",
    "os_reinstall_limit",
)

def _wire_name(field: str) -> str:
    return VirtualMachineParameters.model_fields[field].alias or field

def check_parameters(
    params: VirtualMachineParameters,
    path: str = "spec.forProvider",
    openvz_only_policy: Optional[OpenVZOnlyPolicy] = None,
) -> List[Tuple[str, str]]:
    """Return every rule ``params`` breaks as ``(field path, message)``."""
    policy = openvz_only_policy or settings.OPENVZ_ONLY_FIELDS_POLICY
    if policy not in get_args(OpenVZOnlyPolicy):
        raise ValueError(f"Unknown OpenVZ-only fields policy: {policy}")
    errors: List[Tuple[str, str]] = []

    for field in NON_NEGATIVE_FIELDS:
        value = getattr(params, field)
        if value is not None and value < 0:
            errors.append((f"{path}.{_wire_name(field)}", "must not be negative"))

    if params.ssh_options == SSHOptions.USE_SSH_KEYS and not params.existing_ssh_keys:
        errors.append(
            (
                f"{path}.existingSSHKeys",
                "must contain at least one key when sshOptions is use_ssh_keys",
            )
        )

    if params.ssh_options == SSHOptions.ADD_SSH_KEYS and not params.ssh_public_key:
        errors.append(
            (f"{path}.sshPublicKey", "is required when sshOptions is add_ssh_keys")
        )

    if params.vnc_password is not None and params.enable_vnc is False:
        errors.append((f"{path}.vncPassword", "must not be set when enableVNC is false"))

    if params.virtualization != Virtualization.OPENVZ:
        for field in OPENVZ_ONLY_FIELDS:
            if getattr(params, field) is None:
                continue
            field_path = f"{path}.{_wire_name(field)}"
            if policy == "reject":
                errors.append((field_path, "is only supported for openvz"))
            else:
                logger.warning(
                    "Field only applies to openvz and will be ignored",
                    extra={
                        "field": field_path,
                        "virtualization": params.virtualization.value,
                    },
                )

    return errors

def validate_parameters(
    params: VirtualMachineParameters, openvz_only_policy: Optional[OpenVZOnlyPolicy] = None
) -> None:
    """Raise :class:`SchemaViolationError` if ``params`` breaks any rule."""
    errors = check_parameters(params, openvz_only_policy=openvz_only_policy)
    if errors:
        raise SchemaViolationError(errors)

def validate_virtual_machine(
    vm: VirtualMachine, openvz_only_policy: Optional[OpenVZOnlyPolicy] = None
) -> None:
    """Raise :class:`SchemaViolationError` if ``vm`` breaks any rule."""
    with operation_context(
        "virtualmachine.validate",
        resource_kind=vm.kind_name(),
        resource_name=vm.metadata.name,
    ):
        errors = check_parameters(
            vm.spec.for_provider, openvz_only_policy=openvz_only_policy
        )
        if errors:
            logger.info(
                "VirtualMachine rejected",
                extra={"violations": [f"{p}: {m}" for p, m in errors]},
            )
            raise SchemaViolationError(errors)
