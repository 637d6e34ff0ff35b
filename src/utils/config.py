"""Configuration utility for filesize.

This module provides centralized configuration management with:
- Environment variables as the only source
- Type-safe access to configuration values
"""

import os
from typing import Any


def parse_config_value(value: str) -> str | bool | int | float:
    if value.lower() == "true":
        return True
    elif value.lower() == "false":
        return False
    else:
        # Try to parse as a number
        try:
            return int(value)
        except ValueError:
            try:
                return float(value)
            except ValueError:
                # Return as string
                return value


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a configuration value from environment variables.

    Args:
        key: Configuration key name (e.g., "LOG_LEVEL")
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value is not None:
        return parse_config_value(env_value)

    return default


def get_config_value_str(key: str, default: str | None = None) -> str | None:
    """
    Get a configuration value from environment variables. But sometimes you just want a string.
    """
    return os.environ.get(key, default)


def get_filesize_environment() -> str:
    """Get filesize environment from env var."""
    return str(get_config_value("FILESIZE_ENVIRONMENT") or "local")


def get_log_renderer_override() -> str:
    """Get the LOG_RENDERER override ('console', 'json' or '' for none)."""
    return (get_config_value_str("LOG_RENDERER") or "").lower()


def get_log_level() -> str:
    """Get root log level name from env var, INFO by default."""
    return str(get_config_value("LOG_LEVEL") or "INFO").upper()


def get_default_unit_label() -> str:
    """Get the label of the unit the CLI assumes when --unit is omitted."""
    return str(get_config_value("FILESIZE_DEFAULT_UNIT") or "Byte")
