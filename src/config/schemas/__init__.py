"""Configuration schemas package."""

from .app_schema import AppConfig
from .cpi_schema import (
    AvailabilityZoneConfig,
    CloudConfig,
    CpiConfig,
    CpiInstanceConfig,
    MigratedFromConfig,
)
from .director_schema import DirectorConfig
from .logging_schema import LoggingConfig
from .storage_schema import StorageConfig

__all__ = [
    # Main configuration
    "AppConfig",
    # CPI configurations
    "CloudConfig",
    "CpiConfig",
    "CpiInstanceConfig",
    "MigratedFromConfig",
    "AvailabilityZoneConfig",
    # Other configurations
    "DirectorConfig",
    "LoggingConfig",
    "StorageConfig",
]
