from dataclasses import dataclass, asdict
from typing import Any, Dict

from src.domain.stemcell.value_objects import StemcellRecord


@dataclass
class StemcellDTO:
    """DTO for stemcell responses."""
    id: int
    name: str
    operating_system: str
    version: str
    cpi: str
    cid: str

    @classmethod
    def from_domain(cls, record: StemcellRecord) -> 'StemcellDTO':
        """Create DTO from domain object."""
        return cls(
            id=record.id,
            name=record.name,
            operating_system=record.operating_system,
            version=record.version,
            cpi=record.cpi,
            cid=record.cid,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CidResolutionDTO:
    """DTO for a resolved stemcell CID."""
    deployment: str
    stemcell: str
    az: str
    cid: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
