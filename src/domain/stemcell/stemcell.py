"""Deployment plan stemcell - a parsed reference plus its bound records."""
from typing import Any, Dict, List, Mapping, Optional

from src.domain.deployment.aggregate import Deployment
from src.domain.stemcell.parser import parse_stemcell_spec
from src.domain.stemcell.value_objects import StemcellIdentity, StemcellRecord


class Stemcell:
    """
    Stemcell referenced by a deployment plan.

    Created from the manifest fragment by :meth:`parse`. Once bound by
    ``StemcellModelBinder`` it carries every uploaded record matching its
    name (or OS) and version, across all CPIs, ordered by record id.
    """

    def __init__(self, identity: StemcellIdentity, spec: Mapping[str, Any]):
        self._identity = identity
        self._spec = dict(spec)
        self._models: Optional[List[StemcellRecord]] = None
        self._deployment: Optional[Deployment] = None

    @classmethod
    def parse(cls, spec: Mapping[str, Any]) -> "Stemcell":
        """Parse a manifest stemcell fragment."""
        return cls(parse_stemcell_spec(spec), spec)

    @property
    def identity(self) -> StemcellIdentity:
        return self._identity

    @property
    def name(self) -> Optional[str]:
        return self._identity.name

    @property
    def os(self) -> Optional[str]:
        return self._identity.operating_system

    @property
    def version(self) -> str:
        return self._identity.version

    @property
    def models(self) -> Optional[List[StemcellRecord]]:
        """Bound records, or None before binding."""
        return list(self._models) if self._models is not None else None

    @property
    def deployment(self) -> Optional[Deployment]:
        return self._deployment

    @property
    def is_bound(self) -> bool:
        return self._models is not None

    def spec(self) -> Dict[str, Any]:
        """Return the stemcell spec exactly as it was given."""
        return dict(self._spec)

    def attach(self, deployment: Deployment, models: List[StemcellRecord]) -> None:
        """Record the outcome of binding this stemcell to a deployment."""
        self._deployment = deployment
        self._models = list(models)

    def describe(self) -> str:
        return self._identity.describe()

    def __repr__(self) -> str:
        return f"Stemcell({self.describe()!r}, bound={self.is_bound})"
