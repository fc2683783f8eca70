"""Cloud (CPI) infrastructure - backends and CPI selection."""

from .aws_cloud import AwsCloud
from .backend_selector import BackendSelectorFactory, ConfiguredBackendSelector, create_cloud
from .null_cloud import NullCloud

__all__ = [
    "AwsCloud",
    "NullCloud",
    "ConfiguredBackendSelector",
    "BackendSelectorFactory",
    "create_cloud",
]
