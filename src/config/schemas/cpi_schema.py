"""CPI (cloud provider interface) configuration schemas."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

CLOUD_TYPES = ["aws", "null"]


class CloudConfig(BaseModel):
    """Settings for reaching one cloud backend."""

    type: str = Field("null", description="Cloud type (aws, null)")
    region: Optional[str] = Field(None, description="Region for regional clouds")
    properties: Dict[str, Any] = Field(default_factory=dict, description="Cloud-specific settings")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate cloud type."""
        if v not in CLOUD_TYPES:
            raise ValueError(f"Cloud type must be one of {CLOUD_TYPES}")
        return v


class MigratedFromConfig(BaseModel):
    """A former name of a CPI."""

    name: str = Field(..., description="Name the CPI was previously known by")


class CpiInstanceConfig(CloudConfig):
    """A named CPI from the CPI config."""

    name: str = Field(..., description="Unique CPI name")
    migrated_from: List[MigratedFromConfig] = Field(
        default_factory=list, description="Former names of this CPI, newest first"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate CPI name."""
        if not v or not v.strip():
            raise ValueError("CPI name cannot be empty")
        return v.strip()

    def aliases(self) -> List[str]:
        """Current name followed by former names."""
        return [self.name] + [m.name for m in self.migrated_from]


class AvailabilityZoneConfig(BaseModel):
    """Mapping of an availability zone to the CPI serving it."""

    name: str = Field(..., description="Availability zone name")
    cpi: Optional[str] = Field(None, description="CPI serving this zone")


class CpiConfig(BaseModel):
    """Multi-CPI configuration. Empty ``cpis`` means no CPI config is in effect."""

    cpis: List[CpiInstanceConfig] = Field(default_factory=list)
    azs: List[AvailabilityZoneConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_references(self) -> "CpiConfig":
        """Validate CPI names are unique and AZs reference known CPIs."""
        names = [cpi.name for cpi in self.cpis]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate CPI names: {duplicates}")

        former = [alias for cpi in self.cpis for alias in cpi.aliases()[1:]]
        clashes = sorted(set(former) & set(names))
        if clashes:
            raise ValueError(f"CPI names used as migrated_from of another CPI: {clashes}")

        for az in self.azs:
            if az.cpi is not None and az.cpi not in names:
                raise ValueError(f"Availability zone '{az.name}' references unknown CPI '{az.cpi}'")
        return self

    @property
    def enabled(self) -> bool:
        return bool(self.cpis)

    def find_cpi(self, name: str) -> Optional[CpiInstanceConfig]:
        for cpi in self.cpis:
            if cpi.name == name:
                return cpi
        return None

    def find_az(self, name: str) -> Optional[AvailabilityZoneConfig]:
        for az in self.azs:
            if az.name == name:
                return az
        return None
