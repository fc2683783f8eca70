"""Binding of plan stemcells to uploaded stemcell records."""
import logging
from typing import List, Optional

from src.domain.deployment.aggregate import Deployment
from src.domain.stemcell.exceptions import DeploymentNotBoundError, StemcellNotFoundError
from src.domain.stemcell.repository import StemcellRepository
from src.domain.stemcell.stemcell import Stemcell
from src.domain.stemcell.value_objects import (
    NamedStemcellIdentity,
    OperatingSystemStemcellIdentity,
    StemcellRecord,
)


def _record_order(record: StemcellRecord):
    # Unsaved records (no id) sort after persisted ones, keeping their relative order
    return (record.id is None, record.id or 0)


class StemcellModelBinder:
    """Domain service resolving a plan stemcell against uploaded stemcells."""

    def __init__(self, repository: StemcellRepository):
        self._repository = repository
        self._logger = logging.getLogger(__name__)

    def bind(self, stemcell: Stemcell, deployment: Optional[Deployment]) -> List[StemcellRecord]:
        """
        Bind a stemcell to every matching record and link them to the deployment.

        Records are matched on name (or OS) and version only, so records for
        every CPI become candidates. Candidates are ordered by ascending record
        id; the first one is the fallback default.

        Args:
            stemcell: Parsed plan stemcell
            deployment: Deployment the plan belongs to

        Returns:
            Ordered list of matching stemcell records

        Raises:
            DeploymentNotBoundError: If deployment is None
            StemcellNotFoundError: If no uploaded stemcell matches
        """
        if deployment is None:
            raise DeploymentNotBoundError()

        records = sorted(self._find_candidates(stemcell), key=_record_order)
        if not records:
            raise StemcellNotFoundError(stemcell.describe())

        for record in records:
            self._repository.add_deployment(record, deployment)

        stemcell.attach(deployment, records)
        self._logger.debug(
            f"Bound stemcell {stemcell.describe()} to deployment {deployment.name} "
            f"({len(records)} candidate(s): {[r.cpi for r in records]})"
        )
        return records

    def _find_candidates(self, stemcell: Stemcell) -> List[StemcellRecord]:
        identity = stemcell.identity
        if isinstance(identity, NamedStemcellIdentity):
            return self._repository.find_by_name_and_version(identity.name, identity.version)
        if isinstance(identity, OperatingSystemStemcellIdentity):
            return self._repository.find_by_os_and_version(
                identity.operating_system, identity.version
            )
        raise TypeError(f"Unsupported stemcell identity: {type(identity).__name__}")
