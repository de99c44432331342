"""Pytest configuration and fixtures."""

from typing import Any, Dict

import pytest

from provider_virtono.apis.compute.v1alpha1 import (
    VirtualMachine,
    VirtualMachineParameters,
    VirtualMachineSpec,
)
from provider_virtono.main import create_scheme
from provider_virtono.runtime.meta import ObjectMeta
from provider_virtono.runtime.scheme import Scheme
from provider_virtono.utils.context import clear_context


@pytest.fixture(autouse=True)
def reset_context():
    """Make sure no logging context leaks between tests."""
    clear_context()
    yield
    clear_context()


@pytest.fixture
def scheme() -> Scheme:
    """A freshly populated scheme."""
    return create_scheme()


@pytest.fixture
def parameters_data() -> Dict[str, Any]:
    """Wire form of the minimal valid parameters (every optional unset)."""
    return {
        "virtualization": "kvm",
        "rootPassword": "x",
        "hostname": "vm1",
        "diskSpace": 20,
        "ram": 1024,
        "bandwidth": 1000,
        "userId": 7,
        "cpuCores": 2,
        "osId": 101,
    }


@pytest.fixture
def parameters(parameters_data: Dict[str, Any]) -> VirtualMachineParameters:
    return VirtualMachineParameters.model_validate(parameters_data)


@pytest.fixture
def virtual_machine(parameters: VirtualMachineParameters) -> VirtualMachine:
    return VirtualMachine(
        metadata=ObjectMeta(name="vm1"),
        spec=VirtualMachineSpec(for_provider=parameters),
    )
