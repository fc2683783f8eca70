"""Stemcell value objects and persisted stemcell records."""
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import field_validator

from src.domain.base.entity import Entity, ValueObject


class StemcellIdentity(ValueObject, ABC):
    """
    Parsed stemcell reference.

    A stemcell is referenced either by name or by operating system, never
    both. Each kind has its own subclass; ``version`` is shared and kept
    verbatim, including the literal ``"latest"``.
    """

    version: str

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if not v:
            raise ValueError("Stemcell version cannot be empty")
        return v

    @property
    def name(self) -> Optional[str]:
        return None

    @property
    def operating_system(self) -> Optional[str]:
        return None

    @abstractmethod
    def describe(self) -> str:
        """Human-readable reference, e.g. ``name/version``."""

    def __str__(self) -> str:
        return self.describe()


class NamedStemcellIdentity(StemcellIdentity):
    """Stemcell referenced by name and version."""

    stemcell_name: str

    @property
    def name(self) -> Optional[str]:
        return self.stemcell_name

    def describe(self) -> str:
        return f"{self.stemcell_name}/{self.version}"


class OperatingSystemStemcellIdentity(StemcellIdentity):
    """Stemcell referenced by operating system and version."""

    os: str

    @property
    def operating_system(self) -> Optional[str]:
        return self.os

    def describe(self) -> str:
        return f"{self.os}/{self.version}"


class StemcellRecord(Entity):
    """Uploaded stemcell, one per (name, version, cpi)."""

    name: str
    operating_system: str = ""
    version: str
    cpi: str = ""  # Empty string is the default CPI
    cid: str

    @field_validator("cpi", mode="before")
    @classmethod
    def normalize_cpi(cls, v: Optional[str]) -> str:
        return v or ""

    def describe(self) -> str:
        return f"{self.name}/{self.version}"
