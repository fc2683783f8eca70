"""Deployment bounded context - deployments, instances and their VMs."""
from typing import Optional

from pydantic import Field, field_validator

from src.domain.base.entity import Entity


class Deployment(Entity):
    """A named deployment that stemcells get bound to."""

    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Deployment names must be non-blank."""
        if not v or not v.strip():
            raise ValueError("Deployment name cannot be empty")
        return v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deployment):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((Deployment, self.name))


class Vm(Entity):
    """A VM provisioned on some CPI."""

    cid: str
    cpi: str = ""  # Empty string is the default CPI
    instance_id: Optional[str] = None


class Instance(Entity):
    """An instance of a deployment job, optionally backed by an active VM."""

    name: str
    deployment_name: Optional[str] = None
    active_vm: Optional[Vm] = None

    @property
    def has_active_vm(self) -> bool:
        return self.active_vm is not None


class DeleteVmReport(Entity):
    """Transient carrier handing a VM to the delete-VM step."""

    vm: Optional[Vm] = Field(default=None)
    instance: Optional[Instance] = Field(default=None)
