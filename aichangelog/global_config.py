"""Global configuration management for aichangelog.

Handles user-level configuration stored in ~/.aichangelog/config.yaml:

    model: gpt-4o-mini
    temperature: 0.7
    frequency_penalty: 0.2
    short: true
    max_chars: 30000

Every key is optional. Values given on the command line take precedence.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from aichangelog.exceptions import ConfigError


class GlobalConfigError(ConfigError):
    """Raised when there's an error with global configuration."""

    pass


_CONFIG_DIR = Path.home() / ".aichangelog"


def get_global_config_dir() -> Path:
    """Get the global aichangelog configuration directory.

    Returns:
        Path to ~/.aichangelog/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.aichangelog/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.aichangelog/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")

    return config


def _invalid(key: str, value: Any, expected: str) -> GlobalConfigError:
    return GlobalConfigError(
        f"Invalid value for '{key}' in {get_config_file_path()}: {value!r} (expected {expected})"
    )


def _get_float(key: str, config: Optional[Dict[str, Any]]) -> Optional[float]:
    if config is None:
        config = load_global_config()
    value = config.get(key)
    if value is None:
        return None
    # YAML booleans are ints in Python; reject them explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalid(key, value, "a number")
    return float(value)


def get_model(config: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """Get the configured model name.

    Args:
        config: An already loaded config dict. Loaded from disk if omitted.

    Returns:
        Model name or None if not configured.

    Raises:
        GlobalConfigError: If the value is not a non-empty string.
    """
    if config is None:
        config = load_global_config()
    value = config.get("model")
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise _invalid("model", value, "a model name")
    return value.strip()


def get_temperature(config: Optional[Dict[str, Any]] = None) -> Optional[float]:
    """Get the configured sampling temperature.

    Args:
        config: An already loaded config dict. Loaded from disk if omitted.

    Returns:
        Temperature or None if not configured.
    """
    return _get_float("temperature", config)


def get_frequency_penalty(config: Optional[Dict[str, Any]] = None) -> Optional[float]:
    """Get the configured frequency penalty.

    Args:
        config: An already loaded config dict. Loaded from disk if omitted.

    Returns:
        Frequency penalty or None if not configured.
    """
    return _get_float("frequency_penalty", config)


def get_short(config: Optional[Dict[str, Any]] = None) -> Optional[bool]:
    """Get the configured short-message preference."""
    if config is None:
        config = load_global_config()
    value = config.get("short")
    if value is None:
        return None
    if not isinstance(value, bool):
        raise _invalid("short", value, "true or false")
    return value


def get_max_chars(config: Optional[Dict[str, Any]] = None) -> Optional[int]:
    """Get the configured limit for the commit block sent to the model."""
    if config is None:
        config = load_global_config()
    value = config.get("max_chars")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid("max_chars", value, "an integer")
    return value
