"""CPI selection driven by the CPI config."""
import threading
from typing import Callable, Dict, List, Optional

from src.config.schemas.cpi_schema import CloudConfig, CpiConfig
from src.domain.base.ports.backend_selection_port import BackendSelectionPort
from src.domain.base.ports.cloud_port import CloudPort
from src.domain.deployment.aggregate import Deployment
from src.infrastructure.cloud.aws_cloud import AwsCloud
from src.infrastructure.cloud.null_cloud import NullCloud
from src.infrastructure.exceptions import AvailabilityZoneNotFoundError, CpiNotFoundError
from src.infrastructure.logging.logger import get_logger

DEFAULT_CPI = ""

CloudBuilder = Callable[[CloudConfig, str], CloudPort]


def create_cloud(config: CloudConfig, name: str = DEFAULT_CPI) -> CloudPort:
    """Build the cloud backend described by a cloud config."""
    if config.type == "aws":
        return AwsCloud(region_name=config.region or "us-east-1", config=config.properties, name=name)
    return NullCloud(name=name)


class ConfiguredBackendSelector(BackendSelectionPort):
    """
    Answers CPI questions from a ``CpiConfig``.

    An empty CPI config means a single default CPI (named ``""``) serves
    every availability zone.
    """

    def __init__(
        self,
        cpi_config: Optional[CpiConfig] = None,
        default_cloud_config: Optional[CloudConfig] = None,
        cloud_builder: CloudBuilder = create_cloud,
    ):
        self._cpi_config = cpi_config or CpiConfig()
        self._default_cloud_config = default_cloud_config or CloudConfig()
        self._cloud_builder = cloud_builder
        self._clouds: Dict[str, CloudPort] = {}
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    def uses_explicit_backend_config(self) -> bool:
        return self._cpi_config.enabled

    def backend_name_for_az(self, az_name: Optional[str]) -> str:
        """Get the CPI serving an AZ; no AZ, or an AZ without a CPI, is the default CPI."""
        if not az_name:
            return DEFAULT_CPI

        az = self._cpi_config.find_az(az_name)
        if az is None:
            raise AvailabilityZoneNotFoundError(f"Availability zone '{az_name}' not found in CPI config")
        return az.cpi or DEFAULT_CPI

    def backend_aliases(self, backend_name: str) -> List[str]:
        """Get the CPI's current name followed by the names it was migrated from."""
        if backend_name == DEFAULT_CPI:
            return [DEFAULT_CPI]

        cpi = self._cpi_config.find_cpi(backend_name)
        if cpi is None:
            raise CpiNotFoundError(f"CPI '{backend_name}' not found in CPI config")
        return cpi.aliases()

    def get_cloud(self, backend_name: Optional[str]) -> CloudPort:
        """Get (and cache) the cloud for a CPI name."""
        name = backend_name or DEFAULT_CPI
        with self._lock:
            cloud = self._clouds.get(name)
            if cloud is None:
                cloud = self._cloud_builder(self._cloud_config_for(name), name)
                self._clouds[name] = cloud
                self._logger.debug("Created cloud", cpi=name, cloud_type=type(cloud).__name__)
        return cloud

    def _cloud_config_for(self, name: str) -> CloudConfig:
        if name == DEFAULT_CPI:
            return self._default_cloud_config
        cpi = self._cpi_config.find_cpi(name)
        if cpi is None:
            raise CpiNotFoundError(f"CPI '{name}' not found in CPI config")
        return cpi


class BackendSelectorFactory:
    """Creates the backend selector used for a deployment."""

    def __init__(
        self,
        cpi_config: Optional[CpiConfig] = None,
        default_cloud_config: Optional[CloudConfig] = None,
        cloud_builder: CloudBuilder = create_cloud,
    ):
        self._selector = ConfiguredBackendSelector(cpi_config, default_cloud_config, cloud_builder)

    def for_deployment(self, deployment: Optional[Deployment]) -> BackendSelectionPort:
        """Selector for a deployment; the CPI config is director-wide."""
        return self._selector

    def for_director(self) -> BackendSelectionPort:
        """Selector for operations without a deployment context."""
        return self._selector
