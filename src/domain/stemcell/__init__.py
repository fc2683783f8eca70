"""Stemcell bounded context - stemcell identity, binding and CID resolution."""

from .binder import StemcellModelBinder
from .cid_resolver import CidResolver
from .exceptions import (
    DeploymentNotBoundError,
    StemcellAlreadyExistsError,
    StemcellBothNameAndOSError,
    StemcellException,
    StemcellNotBoundError,
    StemcellNotFoundError,
    ValidationMissingFieldError,
)
from .parser import parse_stemcell_spec
from .repository import StemcellRepository
from .stemcell import Stemcell
from .value_objects import (
    NamedStemcellIdentity,
    OperatingSystemStemcellIdentity,
    StemcellIdentity,
    StemcellRecord,
)

__all__ = [
    "Stemcell",
    "StemcellIdentity",
    "NamedStemcellIdentity",
    "OperatingSystemStemcellIdentity",
    "StemcellRecord",
    "StemcellRepository",
    "StemcellModelBinder",
    "CidResolver",
    "parse_stemcell_spec",
    "StemcellException",
    "ValidationMissingFieldError",
    "StemcellBothNameAndOSError",
    "StemcellNotFoundError",
    "StemcellNotBoundError",
    "StemcellAlreadyExistsError",
    "DeploymentNotBoundError",
]
