"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    AvailabilityZoneConfig,
    CloudConfig,
    CpiConfig,
    CpiInstanceConfig,
    DirectorConfig,
    LoggingConfig,
    MigratedFromConfig,
    StorageConfig,
)

__all__ = [
    "AppConfig",
    "CloudConfig",
    "CpiConfig",
    "CpiInstanceConfig",
    "MigratedFromConfig",
    "AvailabilityZoneConfig",
    "DirectorConfig",
    "LoggingConfig",
    "StorageConfig",
]
