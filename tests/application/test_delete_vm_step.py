import pytest
from unittest.mock import Mock

from src.application.vm.delete_vm_step import DeleteVmStep
from src.domain.base.ports.event_recorder_port import EventRecorderPort
from src.domain.deployment.aggregate import DeleteVmReport, Instance, Vm
from src.infrastructure.exceptions import CloudError, VmNotFoundError


@pytest.fixture
def event_recorder():
    recorder = Mock(spec=EventRecorderPort)
    recorder.record.side_effect = ["1", "2"]
    return recorder


@pytest.fixture
def vm():
    return Vm(cid="vm-cid", cpi="cpi1")


@pytest.fixture
def instance(vm):
    return Instance(name="web/0", deployment_name="mycloud", active_vm=vm)


@pytest.fixture
def report(vm, instance):
    return DeleteVmReport(vm=vm, instance=instance)


def make_step(backend_selector, event_recorder, **kwargs):
    return DeleteVmStep(backend_selector, event_recorder, logger=Mock(), **kwargs)


def test_deletes_vm_on_its_cpi(backend_selector, cloud, event_recorder, report, instance):
    make_step(backend_selector, event_recorder).perform(report)

    backend_selector.get_cloud.assert_called_once_with("cpi1")
    cloud.delete_vm.assert_called_once_with("vm-cid")
    assert instance.active_vm is None
    assert report.vm is None


def test_records_start_and_completion_events(backend_selector, event_recorder, report):
    make_step(backend_selector, event_recorder).perform(report)

    assert event_recorder.record.call_count == 2
    start, done = event_recorder.record.call_args_list
    assert start.kwargs["action"] == "delete"
    assert start.kwargs["object_type"] == "vm"
    assert start.kwargs["object_name"] == "vm-cid"
    assert start.kwargs["parent_id"] is None
    assert start.kwargs["context"] == {"instance": "web/0", "deployment": "mycloud"}
    assert done.kwargs["parent_id"] == "1"
    assert done.kwargs["error"] is None


def test_does_not_record_events_when_disabled(backend_selector, event_recorder, report):
    make_step(backend_selector, event_recorder, store_event=False).perform(report)

    event_recorder.record.assert_not_called()


def test_virtual_delete_skips_cpi_call(backend_selector, cloud, event_recorder, report, instance):
    make_step(backend_selector, event_recorder, enable_virtual_delete_vm=True).perform(report)

    cloud.delete_vm.assert_not_called()
    assert instance.active_vm is None


def test_vm_already_gone_counts_as_deleted(backend_selector, cloud, event_recorder, report, instance):
    cloud.delete_vm.side_effect = VmNotFoundError("vm-cid")

    make_step(backend_selector, event_recorder).perform(report)

    assert instance.active_vm is None


def test_cloud_error_propagates_and_is_recorded(backend_selector, cloud, event_recorder, report, instance):
    cloud.delete_vm.side_effect = CloudError("boom")

    with pytest.raises(CloudError):
        make_step(backend_selector, event_recorder).perform(report)

    assert instance.active_vm is not None
    assert event_recorder.record.call_args_list[-1].kwargs["error"] == "boom"


def test_force_ignores_cloud_error(backend_selector, cloud, event_recorder, report, instance):
    cloud.delete_vm.side_effect = CloudError("boom")

    make_step(backend_selector, event_recorder, force=True).perform(report)

    assert instance.active_vm is None
    assert event_recorder.record.call_args_list[-1].kwargs["error"] is None


def test_empty_report_is_ignored(backend_selector, cloud, event_recorder):
    make_step(backend_selector, event_recorder).perform(DeleteVmReport())

    cloud.delete_vm.assert_not_called()
    event_recorder.record.assert_not_called()
