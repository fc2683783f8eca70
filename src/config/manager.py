"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from src.config.loader import ConfigurationLoader
from src.config.schemas import (
    AppConfig,
    CloudConfig,
    CpiConfig,
    DirectorConfig,
    LoggingConfig,
    StorageConfig,
)
from src.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily from a JSON file (or the default
    locations), environment variables are expanded and overrides applied,
    then the result is validated into an ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader or ConfigurationLoader()

    @classmethod
    def from_config(cls, app_config: AppConfig) -> "ConfigurationManager":
        """Create a manager around an already built configuration."""
        manager = cls()
        manager._app_config = app_config
        return manager

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = self._loader.load_configuration(self._config_file)
        config_data = self._loader.apply_environment_overrides(config_data)
        try:
            return AppConfig(**config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    def reload(self) -> None:
        """Drop the cached configuration so it is loaded again on next access."""
        with self._lock:
            self._app_config = None

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def get_storage_config(self) -> StorageConfig:
        return self.app_config.storage

    def get_director_config(self) -> DirectorConfig:
        return self.app_config.director

    def get_cpi_config(self) -> CpiConfig:
        return self.app_config.cpi

    def get_default_cloud_config(self) -> CloudConfig:
        return self.app_config.default_cloud
