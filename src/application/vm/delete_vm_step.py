# src/application/vm/delete_vm_step.py
from typing import Optional

from src.domain.base.ports.backend_selection_port import BackendSelectionPort
from src.domain.base.ports.event_recorder_port import EventRecorderPort
from src.domain.base.ports.vm_deletion_port import DeleteVmStepPort
from src.domain.deployment.aggregate import DeleteVmReport, Vm
from src.infrastructure.error.error_ignorer import ErrorIgnorer
from src.infrastructure.exceptions import VmNotFoundError
from src.infrastructure.logging.logger import get_logger


class DeleteVmStep(DeleteVmStepPort):
    """
    Deployment step deleting the VM carried by a report.

    The VM is deleted on the CPI it was created on. A VM that is already gone
    from the cloud counts as deleted. With virtual delete enabled no CPI call
    is made and only the bookkeeping is dropped.
    """

    def __init__(
        self,
        backend_selector: BackendSelectionPort,
        event_recorder: EventRecorderPort,
        store_event: bool = True,
        force: bool = False,
        enable_virtual_delete_vm: bool = False,
        logger=None,
    ):
        self._backend_selector = backend_selector
        self._event_recorder = event_recorder
        self._store_event = store_event
        self._force = force
        self._enable_virtual_delete_vm = enable_virtual_delete_vm
        self._logger = logger or get_logger(__name__)
        self._error_ignorer = ErrorIgnorer(force, self._logger)

    def perform(self, report: DeleteVmReport) -> None:
        """Delete the report's VM, recording start and completion events."""
        vm = report.vm
        if vm is None:
            return

        self._logger.info("Deleting VM", vm_cid=vm.cid, cpi=vm.cpi)
        parent_id = self._add_event(report, vm) if self._store_event else None
        error: Optional[Exception] = None
        try:
            self._delete_vm(vm)
            if report.instance is not None and report.instance.active_vm == vm:
                report.instance.active_vm = None
            report.vm = None
        except Exception as e:
            error = e
            raise
        finally:
            if self._store_event:
                self._add_event(report, vm, parent_id, error)

    def _delete_vm(self, vm: Vm) -> None:
        with self._error_ignorer.with_force_check():
            cloud = self._backend_selector.get_cloud(vm.cpi)
            if self._enable_virtual_delete_vm:
                self._logger.info("Virtual delete enabled, skipping CPI call", vm_cid=vm.cid)
                return
            try:
                cloud.delete_vm(vm.cid)
            except VmNotFoundError:
                self._logger.warning(
                    f"VM '{vm.cid}' might have already been deleted from the cloud"
                )

    def _add_event(
        self,
        report: DeleteVmReport,
        vm: Vm,
        parent_id: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> str:
        instance = report.instance
        context = {}
        if instance is not None:
            context = {"instance": instance.name, "deployment": instance.deployment_name}
        return self._event_recorder.record(
            action="delete",
            object_type="vm",
            object_name=vm.cid,
            parent_id=parent_id,
            error=str(error) if error is not None else None,
            context=context,
        )
