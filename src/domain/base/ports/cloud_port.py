"""Domain port for infrastructure (CPI) calls."""

from abc import ABC, abstractmethod


class CloudPort(ABC):
    """Port for the VM operations a CPI exposes."""

    @abstractmethod
    def delete_vm(self, vm_cid: str) -> None:
        """Delete a VM by its backend-specific CID."""
