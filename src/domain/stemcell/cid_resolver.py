"""Resolution of a bound stemcell to the CID of the right CPI."""
import logging
from typing import List, Optional

from src.domain.base.ports.backend_selection_port import BackendSelectionPort
from src.domain.stemcell.exceptions import StemcellNotBoundError, StemcellNotFoundError
from src.domain.stemcell.stemcell import Stemcell
from src.domain.stemcell.value_objects import StemcellRecord

DEFAULT_CPI = ""


class CidResolver:
    """
    Domain service picking the stemcell CID for an availability zone.

    Without an explicit CPI config only records uploaded to the default CPI
    qualify. With one, the AZ's CPI is looked up together with the names it
    was migrated from, and the first alias that has a record wins. Stemcells
    uploaded before a CPI rename therefore stay usable without migrating
    their records.
    """

    def __init__(self, backend_selector: BackendSelectionPort):
        self._backend_selector = backend_selector
        self._logger = logging.getLogger(__name__)

    def cid_for_az(self, stemcell: Stemcell, az_name: Optional[str] = None) -> str:
        """
        Get the CID of a bound stemcell for an availability zone.

        Args:
            stemcell: Stemcell already bound by StemcellModelBinder
            az_name: Availability zone name, or None for no AZ context

        Returns:
            CID of the matching stemcell record

        Raises:
            StemcellNotBoundError: If the stemcell was not bound first
            StemcellNotFoundError: If no record exists for the AZ's CPI
        """
        models = stemcell.models
        if models is None:
            raise StemcellNotBoundError(stemcell.describe())

        if not self._backend_selector.uses_explicit_backend_config():
            return self._cid_for_aliases(stemcell, models, DEFAULT_CPI, [DEFAULT_CPI])

        cpi = self._backend_selector.backend_name_for_az(az_name)
        aliases = self._backend_selector.backend_aliases(cpi)
        return self._cid_for_aliases(stemcell, models, cpi, aliases)

    def _cid_for_aliases(
        self,
        stemcell: Stemcell,
        models: List[StemcellRecord],
        cpi: str,
        aliases: List[str],
    ) -> str:
        for alias in aliases:
            for model in models:
                if model.cpi == alias:
                    self._logger.debug(
                        f"Resolved stemcell {stemcell.describe()} for CPI '{cpi}' "
                        f"via alias '{alias}' to {model.cid}"
                    )
                    return model.cid
        raise StemcellNotFoundError(stemcell.describe(), cpi)
