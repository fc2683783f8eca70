import pytest

from src.application.stemcell.service import StemcellApplicationService
from src.config.schemas.cpi_schema import CpiConfig
from src.domain.stemcell.exceptions import (
    StemcellAlreadyExistsError,
    StemcellNotFoundError,
    ValidationMissingFieldError,
)
from src.infrastructure.cloud.backend_selector import BackendSelectorFactory


@pytest.fixture
def cpi_config():
    return CpiConfig.model_validate({
        "cpis": [
            {"name": "cpi1"},
            {"name": "cpi2", "migrated_from": [{"name": "old-cpi2"}]},
        ],
        "azs": [{"name": "z1", "cpi": "cpi1"}, {"name": "z2", "cpi": "cpi2"}],
    })


@pytest.fixture
def service(stemcell_repository, cpi_config):
    return StemcellApplicationService(stemcell_repository, BackendSelectorFactory(cpi_config))


@pytest.fixture
def default_service(stemcell_repository):
    return StemcellApplicationService(stemcell_repository, BackendSelectorFactory())


def test_upload_and_list(default_service):
    uploaded = default_service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-1")

    assert uploaded.id is not None
    assert uploaded.cpi == ""
    assert [s.cid for s in default_service.list_stemcells()] == ["cid-1"]


def test_duplicate_upload_fails(default_service):
    default_service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-1", cpi="cpi1")

    with pytest.raises(StemcellAlreadyExistsError):
        default_service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-2", cpi="cpi1")


def test_resolve_cid_per_az(service):
    service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-1", cpi="cpi1")
    service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-2", cpi="cpi2")
    spec = {"name": "stemcell-name", "version": "1"}

    assert service.resolve_cid("mycloud", spec, "z1").cid == "cid-1"
    result = service.resolve_cid("mycloud", spec, "z2")

    assert result.to_dict() == {
        "deployment": "mycloud",
        "stemcell": "stemcell-name/1",
        "az": "z2",
        "cid": "cid-2",
    }


def test_resolve_cid_by_os_through_migrated_name(service):
    service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-old", cpi="old-cpi2")

    result = service.resolve_cid("mycloud", {"os": "ubuntu", "version": "1"}, "z2")

    assert result.cid == "cid-old"


def test_resolve_cid_without_cpi_config(default_service):
    default_service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-1")

    result = default_service.resolve_cid("mycloud", {"name": "stemcell-name", "version": "1"})

    assert result.cid == "cid-1"
    assert result.az == ""


def test_resolve_cid_binds_deployment(service):
    service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-1", cpi="cpi1")
    service.upload_stemcell("stemcell-name", "ubuntu", "1", "cid-2", cpi="cpi2")

    service.resolve_cid("mycloud", {"name": "stemcell-name", "version": "1"}, "z1")

    assert [s.cid for s in service.get_deployment_stemcells("mycloud")] == ["cid-1", "cid-2"]
    assert service.get_deployment_stemcells("other") == []


def test_resolve_cid_for_unknown_stemcell(service):
    with pytest.raises(StemcellNotFoundError):
        service.resolve_cid("mycloud", {"name": "nope", "version": "1"}, "z1")


def test_resolve_cid_with_invalid_spec(service):
    with pytest.raises(ValidationMissingFieldError):
        service.resolve_cid("mycloud", {"name": "stemcell-name"}, "z1")
