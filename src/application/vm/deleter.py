"""VM deletion guard."""
from typing import Callable

from src.application.vm.delete_vm_step import DeleteVmStep
from src.domain.base.ports.backend_selection_port import BackendSelectionPort
from src.domain.base.ports.event_recorder_port import EventRecorderPort
from src.domain.base.ports.vm_deletion_port import DeleteVmStepPort
from src.domain.deployment.aggregate import DeleteVmReport, Instance
from src.infrastructure.error.error_ignorer import ErrorIgnorer
from src.infrastructure.logging.logger import get_logger

# (store_event, force, enable_virtual_delete_vm) -> step
DeleteVmStepFactory = Callable[[bool, bool, bool], DeleteVmStepPort]


class VmDeleter:
    """
    Deletes VMs, refusing to guess the CPI when several may exist.

    Args:
        backend_selector: Director-wide CPI selection
        delete_vm_step_factory: Builds the step used for instance VMs
        force: Log and ignore CPI errors instead of raising them
        enable_virtual_delete_vm: Forget VMs without calling the CPI
        logger: Logger, defaults to this module's logger
    """

    def __init__(
        self,
        backend_selector: BackendSelectionPort,
        delete_vm_step_factory: DeleteVmStepFactory,
        force: bool = False,
        enable_virtual_delete_vm: bool = False,
        logger=None,
    ):
        self._backend_selector = backend_selector
        self._delete_vm_step_factory = delete_vm_step_factory
        self._force = force
        self._enable_virtual_delete_vm = enable_virtual_delete_vm
        self._logger = logger or get_logger(__name__)
        self._error_ignorer = ErrorIgnorer(force, self._logger)

    def delete_for_instance(self, instance: Instance, store_event: bool = True) -> None:
        """Delete the instance's active VM, if it has one."""
        if instance.active_vm is None:
            return

        step = self._delete_vm_step_factory(store_event, self._force, self._enable_virtual_delete_vm)
        step.perform(DeleteVmReport(vm=instance.active_vm, instance=instance))

    def delete_vm_by_cid(self, cid: str) -> None:
        """
        Delete a VM known only by its CID on the default CPI.

        Skipped entirely when a CPI config is in effect: the same CID may
        exist on more than one CPI, so deleting it on the default one could
        hit the wrong VM. Also skipped with virtual delete enabled.
        """
        self._logger.info("Deleting VM", vm_cid=cid)
        with self._error_ignorer.with_force_check():
            if self._backend_selector.uses_explicit_backend_config():
                self._logger.warning(
                    "CPI config in effect, not deleting VM by CID alone", vm_cid=cid
                )
                return
            if self._enable_virtual_delete_vm:
                return
            self._backend_selector.get_cloud(None).delete_vm(cid)


def default_delete_vm_step_factory(
    backend_selector: BackendSelectionPort,
    event_recorder: EventRecorderPort,
    logger=None,
) -> DeleteVmStepFactory:
    """Factory building ``DeleteVmStep`` instances bound to the given collaborators."""
    def factory(store_event: bool, force: bool, enable_virtual_delete_vm: bool) -> DeleteVmStepPort:
        return DeleteVmStep(
            backend_selector,
            event_recorder,
            store_event=store_event,
            force=force,
            enable_virtual_delete_vm=enable_virtual_delete_vm,
            logger=logger,
        )

    return factory
