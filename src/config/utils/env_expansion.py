"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any

# ${VAR:default} is not understood by os.path.expandvars
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in strings, recursively through dicts and lists.

    Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Unknown variables
    without a default are left untouched.
    """
    if isinstance(value, str):
        expanded = _DEFAULT_PATTERN.sub(
            lambda m: os.environ.get(m.group(1), m.group(2)), value
        )
        return os.path.expandvars(expanded)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: dict) -> dict:
    """Expand environment variables throughout a configuration dictionary."""
    return expand_env_vars(config)
