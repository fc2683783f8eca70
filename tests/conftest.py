import pytest
from unittest.mock import Mock
from typing import Callable

from src.domain.base.ports.backend_selection_port import BackendSelectionPort
from src.domain.base.ports.cloud_port import CloudPort
from src.domain.deployment.aggregate import Deployment
from src.domain.stemcell.value_objects import StemcellRecord
from src.infrastructure.persistence.sqlite_stemcell_repository import SQLiteStemcellRepository


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')


@pytest.fixture
def stemcell_repository():
    repository = SQLiteStemcellRepository(":memory:")
    yield repository
    repository.close()


@pytest.fixture
def deployment():
    return Deployment(name="mycloud")


@pytest.fixture
def make_stemcell(stemcell_repository) -> Callable[..., StemcellRecord]:
    """Store a stemcell record, mirroring an upload."""
    counter = {"n": 0}

    def _make(name: str, version: str, os: str = "os1", cpi: str = "", cid: str = None) -> StemcellRecord:
        counter["n"] += 1
        return stemcell_repository.add(StemcellRecord(
            name=name,
            operating_system=os,
            version=version,
            cpi=cpi,
            cid=cid or f"stemcell-cid-{counter['n']}",
        ))

    return _make


@pytest.fixture
def cloud():
    return Mock(spec=CloudPort)


@pytest.fixture
def backend_selector(cloud):
    """Backend selector reporting no CPI config, with a mocked default cloud."""
    selector = Mock(spec=BackendSelectionPort)
    selector.uses_explicit_backend_config.return_value = False
    selector.get_cloud.return_value = cloud
    return selector
