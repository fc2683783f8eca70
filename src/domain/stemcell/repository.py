"""Stemcell repository interface - contract for stemcell data access."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.deployment.aggregate import Deployment
from src.domain.stemcell.value_objects import StemcellRecord


class StemcellRepository(ABC):
    """
    Repository interface for uploaded stemcells and their deployment links.

    Finders return records ordered by ascending record id.
    """

    @abstractmethod
    def add(self, record: StemcellRecord) -> StemcellRecord:
        """Store a new stemcell record and return it with its id set.

        Raises:
            StemcellAlreadyExistsError: If (name, version, cpi) is taken
        """

    @abstractmethod
    def find_by_id(self, record_id: int) -> Optional[StemcellRecord]:
        """Find a stemcell record by id."""

    @abstractmethod
    def find_by_name_and_version(self, name: str, version: str) -> List[StemcellRecord]:
        """Find records with the given name and version on any CPI."""

    @abstractmethod
    def find_by_os_and_version(self, operating_system: str, version: str) -> List[StemcellRecord]:
        """Find records with the given operating system and version on any CPI."""

    @abstractmethod
    def find_all(self) -> List[StemcellRecord]:
        """Find all stemcell records."""

    @abstractmethod
    def add_deployment(self, record: StemcellRecord, deployment: Deployment) -> None:
        """Associate a record with a deployment; associating twice is a no-op."""

    @abstractmethod
    def find_by_deployment(self, deployment_name: str) -> List[StemcellRecord]:
        """Find the records associated with a deployment."""
