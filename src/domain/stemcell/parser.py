"""Parsing of raw stemcell references from deployment manifests."""
from typing import Any, Mapping

from src.domain.base.exceptions import ValidationError
from src.domain.stemcell.exceptions import (
    StemcellBothNameAndOSError,
    ValidationMissingFieldError,
)
from src.domain.stemcell.value_objects import (
    NamedStemcellIdentity,
    OperatingSystemStemcellIdentity,
    StemcellIdentity,
)


def _present(spec: Mapping[str, Any], key: str) -> bool:
    return spec.get(key) not in (None, "")


def parse_stemcell_spec(spec: Mapping[str, Any]) -> StemcellIdentity:
    """
    Parse a raw stemcell reference into a stemcell identity.

    Args:
        spec: Mapping with ``version`` and exactly one of ``name`` or ``os``

    Returns:
        NamedStemcellIdentity or OperatingSystemStemcellIdentity

    Raises:
        ValidationMissingFieldError: If ``version`` or both ``name`` and ``os`` are missing
        StemcellBothNameAndOSError: If both ``name`` and ``os`` are given
    """
    if not isinstance(spec, Mapping):
        raise ValidationError(f"Stemcell spec must be a mapping, got {type(spec).__name__}")

    if not _present(spec, "version"):
        raise ValidationMissingFieldError(["version"], spec)

    has_name = _present(spec, "name")
    has_os = _present(spec, "os")

    if has_name and has_os:
        raise StemcellBothNameAndOSError(spec)
    if not has_name and not has_os:
        raise ValidationMissingFieldError(["os", "name"], spec)

    version = str(spec["version"])
    if has_name:
        return NamedStemcellIdentity(stemcell_name=str(spec["name"]), version=version)
    return OperatingSystemStemcellIdentity(os=str(spec["os"]), version=version)
