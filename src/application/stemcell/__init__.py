"""Stemcell application services."""

from .dto import CidResolutionDTO, StemcellDTO
from .service import StemcellApplicationService

__all__ = ["StemcellApplicationService", "StemcellDTO", "CidResolutionDTO"]
