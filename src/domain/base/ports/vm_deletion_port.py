"""Domain port for the delete-VM workflow step."""

from abc import ABC, abstractmethod

from src.domain.deployment.aggregate import DeleteVmReport


class DeleteVmStepPort(ABC):
    """Port for the step that deletes a VM and records the deletion."""

    @abstractmethod
    def perform(self, report: DeleteVmReport) -> None:
        """Delete the VM carried by the report."""
