"""VM application services."""

from .delete_vm_step import DeleteVmStep
from .deleter import VmDeleter, default_delete_vm_step_factory

__all__ = ["VmDeleter", "DeleteVmStep", "default_delete_vm_step_factory"]
