"""Domain ports for infrastructure concerns."""

from .backend_selection_port import BackendSelectionPort
from .cloud_port import CloudPort
from .event_recorder_port import EventRecorderPort
from .vm_deletion_port import DeleteVmStepPort

__all__ = [
    "BackendSelectionPort",
    "CloudPort",
    "DeleteVmStepPort",
    "EventRecorderPort",
]
