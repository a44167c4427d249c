"""Configuration exception classes.

Contains:
- ConfigError: Base exception for configuration errors
- MissingAPIKeyError: Raised when the API key is not set
"""


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class MissingAPIKeyError(ConfigError):
    """Raised when the required API key is not set."""

    pass
