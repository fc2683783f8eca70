"""Stemcell domain exceptions."""

import json
from typing import Any, Mapping, Optional, Sequence

from src.domain.base.exceptions import (
    DomainException,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)


def render_spec(spec: Mapping[str, Any]) -> str:
    """Render a raw spec for error messages, keeping key order."""
    return json.dumps(dict(spec), default=str)


class StemcellException(DomainException):
    """Base exception for stemcell domain errors."""


class ValidationMissingFieldError(ValidationError):
    """Raised when a required stemcell property is absent."""

    def __init__(self, fields: Sequence[str], spec: Mapping[str, Any]):
        self.fields = tuple(fields)
        label = " or ".join(f"'{field}'" for field in self.fields)
        super().__init__(
            f"Required property {label} was not specified in object ({render_spec(spec)})",
            "VALIDATION_MISSING_FIELD",
            {"fields": list(self.fields)},
        )


class StemcellBothNameAndOSError(ValidationError):
    """Raised when a stemcell spec names both an OS and a stemcell name."""

    def __init__(self, spec: Mapping[str, Any]):
        super().__init__(
            "Properties 'os' and 'name' are both specified for stemcell, choose one. "
            f"({render_spec(spec)})",
            "STEMCELL_BOTH_NAME_AND_OS",
        )


class StemcellNotFoundError(EntityNotFoundError):
    """Raised when no uploaded stemcell satisfies a lookup."""

    def __init__(self, description: str, cpi: Optional[str] = None):
        message = f"Stemcell '{description}' doesn't exist"
        if cpi is not None:
            message = f"{message} for CPI '{cpi}'"
        super().__init__("Stemcell", description, message)
        self.cpi = cpi


class StemcellAlreadyExistsError(StemcellException):
    """Raised when a (name, version, cpi) triple is uploaded twice."""

    def __init__(self, name: str, version: str, cpi: str):
        super().__init__(
            f"Stemcell '{name}/{version}' already exists for CPI '{cpi}'",
            "STEMCELL_ALREADY_EXISTS",
            {"name": name, "version": version, "cpi": cpi},
        )


class StemcellNotBoundError(InvariantViolationError):
    """Raised when a CID is requested from a stemcell that was never bound."""

    def __init__(self, description: str):
        super().__init__(
            f"Stemcell '{description}' has no models, please bind model first",
            "STEMCELL_NOT_BOUND",
        )


class DeploymentNotBoundError(InvariantViolationError):
    """Raised when binding is attempted without a deployment."""

    def __init__(self):
        super().__init__("Deployment not bound in the deployment plan", "DEPLOYMENT_NOT_BOUND")
