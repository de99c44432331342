"""VirtualMachine managed resource.

``spec.forProvider`` holds what the caller wants provisioned on Virtono and
is never written by the reconciler. ``status.atProvider`` holds what the
reconciler last observed, next to the Ready and Synced conditions.

Every optional parameter is ``None`` when unset. ``None`` means the provider
default applies, which is not the same as an explicit ``0`` or ``False``.
Unset parameters are omitted on encode.
"""

from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import ConfigDict, Field, model_validator

from provider_virtono.apis.compute.v1alpha1.groupversion_info import (
    SCHEME_BUILDER,
    SCHEME_GROUP_VERSION,
)
from provider_virtono.runtime.common import ResourceSpec, ResourceStatus
from provider_virtono.runtime.meta import (
    GroupVersion,
    ListMeta,
    ObjectMeta,
    WireModel,
    type_identity,
)
from provider_virtono.runtime.resource import Managed, ManagedList


class Virtualization(str, Enum):
    """Virtualization types accepted by Virtono."""

    OPENVZ = "openvz"
    XEN = "xen"
    XENHVM = "xenhvm"
    KVM = "kvm"
    XCP = "xcp"
    XCPHVM = "xcphvm"
    LXC = "lxc"
    VZO = "vzo"
    VZK = "vzk"
    PROXO = "proxo"
    PROXK = "proxk"
    PROXL = "proxl"


class BIOS(str, Enum):
    SEABIOS = "seabios"
    UEFI = "uefi"


class SSHOptions(str, Enum):
    """How SSH keys are installed on the new VPS."""

    ADD_SSH_KEYS = "add_ssh_keys"
    GENERATE_KEYS = "generate_keys"
    USE_SSH_KEYS = "use_ssh_keys"


class VirtualMachineParameters(WireModel):
    """The configurable fields of a VirtualMachine."""

    # Placement
    virtualization: Virtualization = Field(
        ..., description="Virtualization type the VPS is created with"
    )
    server_group_id: Optional[int] = Field(
        default=None,
        alias="serverGroupId",
        description="Server group the VPS is created in and assigned to",
    )
    user_id: int = Field(
        ..., alias="userId", description="User the VPS is created under"
    )

    # Credentials
    root_password: str = Field(
        ...,
        alias="rootPassword",
        description="Password of the root user / administrator",
    )
    hostname: str = Field(..., description="Hostname")

    # Capacity
    disk_space: int = Field(..., alias="diskSpace", description="Allowed disk space")
    ram: int = Field(..., description="RAM the VPS always has")
    burstable_ram: Optional[int] = Field(
        default=None,
        alias="burstableRAM",
        description="Maximum RAM the VPS can use",
    )
    swap_ram: Optional[int] = Field(default=None, alias="swapRAM", description="Swap RAM")
    bandwidth: int = Field(..., description="Monthly bandwidth limit")
    cpu: Optional[int] = Field(
        default=None, description="CPU weight assigned to the user"
    )
    cpu_percent: Optional[int] = Field(
        default=None,
        alias="cpuPercent",
        description="CPU share in percent assigned to the VPS",
    )
    cpu_cores: int = Field(..., alias="cpuCores", description="Number of CPU cores")
    shadow_memory: Optional[int] = Field(
        default=None,
        alias="shadowMemory",
        description="Shadow memory, used for Xen HVM",
    )

    # Addressing
    num_ipv4: Optional[int] = Field(
        default=None, alias="numIpv4", description="Number of IPv4 addresses"
    )
    num_internal_ips: Optional[int] = Field(
        default=None,
        alias="numInternalIps",
        description="Number of internal IP addresses",
    )
    num_ipv6: Optional[int] = Field(
        default=None, alias="numIpv6", description="Number of IPv6 addresses"
    )
    num_ipv6_subnets: Optional[int] = Field(
        default=None, alias="numIpv6Subnets", description="Number of IPv6 subnets"
    )

    # Remote console
    enable_vnc: Optional[bool] = Field(
        default=None, alias="enableVNC", description="Whether VNC is set up"
    )
    vnc_password: Optional[str] = Field(
        default=None,
        alias="vncPassword",
        description="VNC password, generated by the provider if omitted",
    )

    # Boot and OS
    os_id: int = Field(..., alias="osId", description="Operating system ID")
    media_group_id: Optional[str] = Field(
        default=None,
        alias="mediaGroupId",
        description="Media group of the OS templates",
    )
    iso: Optional[str] = Field(
        default=None, description="ISO on the server to create the VPS from"
    )
    boot_order: Optional[int] = Field(
        default=None, alias="bootOrder", description="Boot order"
    )
    bios: Optional[BIOS] = Field(
        default=None,
        description="BIOS type, applied only when booting from an ISO (KVM only)",
    )
    nic: Optional[str] = Field(default=None, description="Virtual network interface type")

    # Virtualization specific
    enable_tuntap: Optional[int] = Field(
        default=None, alias="enableTuntap", description="Enable tuntap (OpenVZ only)"
    )
    enable_io_priority: Optional[int] = Field(
        default=None,
        alias="enableIOPriority",
        description="Enable IO priority (OpenVZ only)",
    )
    suspend_if_bandwidth_exceeded: Optional[bool] = Field(
        default=None,
        alias="suspendIfBandwidthExceeded",
        description="Suspend the VPS when the bandwidth limit is exceeded",
    )
    os_reinstall_limit: Optional[int] = Field(
        default=None,
        alias="osReinstallLimit",
        description="Maximum number of OS re-installations",
    )

    # SSH
    ssh_options: Optional[SSHOptions] = Field(
        default=None, alias="sshOptions", description="How SSH keys are installed"
    )
    ssh_public_key: Optional[str] = Field(
        default=None, alias="sshPublicKey", description="Public SSH key"
    )
    ssh_private_key: Optional[int] = Field(
        default=None,
        alias="sshPrivateKey",
        description="Reference to the stored private SSH key",
    )
    existing_ssh_keys: Optional[List[str]] = Field(
        default=None,
        alias="existingSSHKeys",
        description="Public keys to install, required with use_ssh_keys",
    )


class VirtualMachineObservation(WireModel):
    """The observable fields of a VirtualMachine.

    Keys this version does not know are kept, so stored objects written by
    a newer reconciler still decode.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    observable_field: Optional[str] = Field(default=None, alias="observableField")


class VirtualMachineSpec(ResourceSpec):
    """The desired state of a VirtualMachine."""

    for_provider: VirtualMachineParameters = Field(..., alias="forProvider")


class VirtualMachineStatus(ResourceStatus):
    """The observed state of a VirtualMachine."""

    at_provider: VirtualMachineObservation = Field(
        default_factory=VirtualMachineObservation, alias="atProvider"
    )


class VirtualMachine(Managed, WireModel):
    """A Virtono virtual private server."""

    group_version: ClassVar[GroupVersion] = SCHEME_GROUP_VERSION
    plural: ClassVar[str] = "virtualmachines"
    categories: ClassVar[tuple] = ("crossplane", "managed", "virtono")

    api_version: Optional[str] = Field(default=None, alias="apiVersion")
    kind: Optional[str] = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    spec: VirtualMachineSpec
    status: VirtualMachineStatus = Field(default_factory=VirtualMachineStatus)

    @model_validator(mode="after")
    def default_type_meta(self) -> "VirtualMachine":
        return self.fill_type_meta()


class VirtualMachineList(ManagedList, WireModel):
    """A list of VirtualMachine."""

    group_version: ClassVar[GroupVersion] = SCHEME_GROUP_VERSION

    api_version: Optional[str] = Field(default=None, alias="apiVersion")
    kind: Optional[str] = None
    metadata: ListMeta = Field(default_factory=ListMeta)

    items: List[VirtualMachine] = Field(default_factory=list)

    @model_validator(mode="after")
    def default_type_meta(self) -> "VirtualMachineList":
        return self.fill_type_meta()


_identity = type_identity(VirtualMachine.__name__, SCHEME_GROUP_VERSION)

VIRTUAL_MACHINE_KIND = _identity.kind
VIRTUAL_MACHINE_GROUP_KIND = _identity.group_kind
VIRTUAL_MACHINE_KIND_API_VERSION = _identity.kind_api_version
VIRTUAL_MACHINE_GROUP_VERSION_KIND = _identity.group_version_kind

SCHEME_BUILDER.register(VirtualMachine, VirtualMachineList)
