"""Configuration loading from files and environment."""
import json
import logging
import os
from typing import Any, Dict, Optional

from src.config.utils.env_expansion import expand_config_env_vars
from src.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "STEMCELL_CORE_"
DEFAULT_CONFIG_PATHS = ["config/stemcell_core.json", "/etc/stemcell_core/config.json"]

# Environment variable -> (section, key, type)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("logging", "level", str),
    "LOG_DESTINATION": ("logging", "destination", str),
    "DB_PATH": ("storage", "db_path", str),
    "FORCE_DELETE": ("director", "force_delete", bool),
    "ENABLE_VIRTUAL_DELETE_VMS": ("director", "enable_virtual_delete_vms", bool),
    "ENVIRONMENT": (None, "environment", str),
}


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class ConfigurationLoader:
    """Loads raw configuration dictionaries from JSON files and the environment."""

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """Load a JSON configuration file and expand environment variables in it."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {path}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

        logger.debug(f"Loaded configuration from {path}")
        return expand_config_env_vars(data)

    def load_configuration(self, path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the given path or the first default location found."""
        if path:
            return self.load_from_file(path)
        for candidate in DEFAULT_CONFIG_PATHS:
            if os.path.exists(candidate):
                return self.load_from_file(candidate)
        logger.debug("No configuration file found, using defaults")
        return {}

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply STEMCELL_CORE_* environment variable overrides."""
        result = dict(config)
        for suffix, (section, key, value_type) in ENV_OVERRIDES.items():
            raw = os.environ.get(ENV_PREFIX + suffix)
            if raw is None:
                continue
            value = _to_bool(raw) if value_type is bool else raw
            if section is None:
                result[key] = value
            else:
                result[section] = {**result.get(section, {}), key: value}
        return result
