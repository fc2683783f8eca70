"""Domain port for CPI (backend) selection."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.base.ports.cloud_port import CloudPort


class BackendSelectionPort(ABC):
    """
    Port answering which CPI serves which availability zone.

    Implementations are built for one deployment (or for the whole director
    when no deployment context exists) and are read-only.
    """

    @abstractmethod
    def uses_explicit_backend_config(self) -> bool:
        """Whether an explicit per-CPI configuration is in effect."""

    @abstractmethod
    def backend_name_for_az(self, az_name: Optional[str]) -> str:
        """Get the CPI name assigned to an availability zone ("" is the default CPI)."""

    @abstractmethod
    def backend_aliases(self, backend_name: str) -> List[str]:
        """Get every name a CPI has been known by, current name first."""

    @abstractmethod
    def get_cloud(self, backend_name: Optional[str]) -> CloudPort:
        """Get the cloud for a CPI name; None or "" selects the default cloud."""
