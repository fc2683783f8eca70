"""Deployment bounded context - deployments and instance VMs."""

from .aggregate import DeleteVmReport, Deployment, Instance, Vm

__all__ = ["Deployment", "Instance", "Vm", "DeleteVmReport"]
