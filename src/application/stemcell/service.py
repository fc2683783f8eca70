# src/application/stemcell/service.py
from typing import Any, List, Mapping, Optional

from src.application.stemcell.dto import CidResolutionDTO, StemcellDTO
from src.domain.deployment.aggregate import Deployment
from src.domain.stemcell.binder import StemcellModelBinder
from src.domain.stemcell.cid_resolver import CidResolver
from src.domain.stemcell.repository import StemcellRepository
from src.domain.stemcell.stemcell import Stemcell
from src.domain.stemcell.value_objects import StemcellRecord
from src.infrastructure.cloud.backend_selector import BackendSelectorFactory
from src.infrastructure.logging.logger import get_logger


class StemcellApplicationService:
    """Application service for stemcell uploads and CID lookups."""

    def __init__(self,
                 repository: StemcellRepository,
                 backend_selector_factory: BackendSelectorFactory):
        self._repository = repository
        self._binder = StemcellModelBinder(repository)
        self._backend_selector_factory = backend_selector_factory
        self._logger = get_logger(__name__)

    def upload_stemcell(self,
                        name: str,
                        operating_system: str,
                        version: str,
                        cid: str,
                        cpi: str = "") -> StemcellDTO:
        """Register a stemcell that was uploaded to a CPI."""
        record = self._repository.add(StemcellRecord(
            name=name,
            operating_system=operating_system,
            version=version,
            cpi=cpi,
            cid=cid,
        ))
        self._logger.info("Stemcell uploaded", stemcell=record.describe(), cpi=cpi, cid=cid)
        return StemcellDTO.from_domain(record)

    def list_stemcells(self) -> List[StemcellDTO]:
        return [StemcellDTO.from_domain(r) for r in self._repository.find_all()]

    def bind_stemcell(self, deployment_name: str, spec: Mapping[str, Any]) -> Stemcell:
        """Parse a manifest stemcell and bind it to the deployment."""
        deployment = Deployment(name=deployment_name)
        stemcell = Stemcell.parse(spec)
        self._binder.bind(stemcell, deployment)
        return stemcell

    def resolve_cid(self,
                    deployment_name: str,
                    spec: Mapping[str, Any],
                    az_name: Optional[str] = None) -> CidResolutionDTO:
        """
        Resolve the stemcell CID a deployment should use in an AZ.

        Args:
            deployment_name: Deployment the stemcell belongs to
            spec: Manifest stemcell fragment (``name`` or ``os``, and ``version``)
            az_name: Availability zone, or None for no AZ context

        Returns:
            CidResolutionDTO with the resolved CID
        """
        stemcell = self.bind_stemcell(deployment_name, spec)
        resolver = CidResolver(self._backend_selector_factory.for_deployment(stemcell.deployment))
        cid = resolver.cid_for_az(stemcell, az_name)
        self._logger.info(
            "Resolved stemcell CID",
            deployment=deployment_name,
            stemcell=stemcell.describe(),
            az=az_name,
            cid=cid,
        )
        return CidResolutionDTO(
            deployment=deployment_name,
            stemcell=stemcell.describe(),
            az=az_name or "",
            cid=cid,
        )

    def get_deployment_stemcells(self, deployment_name: str) -> List[StemcellDTO]:
        """Get the stemcells bound to a deployment."""
        return [StemcellDTO.from_domain(r) for r in self._repository.find_by_deployment(deployment_name)]
