"""Configuration for aichangelog.

Settings are resolved once per run, in order of precedence:
command-line flags, then ~/.aichangelog/config.yaml, then the defaults below.
The API key is only ever read from the environment (or a local .env file).
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from aichangelog import global_config
from aichangelog.exceptions import ConfigError, MissingAPIKeyError

# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 1.0
DEFAULT_FREQUENCY_PENALTY = 0.0
DEFAULT_MAX_CHARS = 50000

API_KEY_ENV_VAR = "OPENAI_API_KEY"

# Bounds accepted by the OpenAI chat completions API
TEMPERATURE_RANGE = (0.0, 2.0)
FREQUENCY_PENALTY_RANGE = (-2.0, 2.0)


class ChangelogConfig(BaseModel):
    """Settings for a single changelog run."""

    model_config = ConfigDict(frozen=True)

    short: bool = False
    temperature: float = DEFAULT_TEMPERATURE
    frequency_penalty: float = DEFAULT_FREQUENCY_PENALTY
    model: str = DEFAULT_MODEL
    api_key: str = Field(repr=False)
    rev_range: Optional[str] = None
    max_chars: int = DEFAULT_MAX_CHARS


def load_env_file() -> None:
    """Load variables from the nearest .env file, searching up from the working directory.

    Variables already set in the environment are not overridden.
    """
    load_dotenv(find_dotenv(usecwd=True))


def get_api_key() -> str:
    """Get the OpenAI API key from environment.

    Returns:
        The API key string.

    Raises:
        MissingAPIKeyError: If OPENAI_API_KEY is not set.
    """
    api_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
    if not api_key:
        raise MissingAPIKeyError(
            f"{API_KEY_ENV_VAR} environment variable is not set. "
            f"Please set it with: export {API_KEY_ENV_VAR}=your_key"
        )
    return api_key


def _first_set(*values):
    for value in values:
        if value is not None:
            return value
    return None


def resolve_config(
    short: Optional[bool] = None,
    temperature: Optional[float] = None,
    frequency_penalty: Optional[float] = None,
    model: Optional[str] = None,
    rev_range: Optional[str] = None,
    max_chars: Optional[int] = None,
) -> ChangelogConfig:
    """Build the run configuration from flags, the global config and defaults.

    Args:
        short: Only use the first line of each commit message.
        temperature: Sampling temperature.
        frequency_penalty: Frequency penalty.
        model: Model name.
        rev_range: Revision range to read commits from.
        max_chars: Maximum characters of commit text sent to the model.

    Returns:
        The resolved ChangelogConfig.

    Raises:
        MissingAPIKeyError: If OPENAI_API_KEY is not set.
        GlobalConfigError: If the global config file is invalid.
    """
    load_env_file()
    api_key = get_api_key()

    file_config = global_config.load_global_config()

    # `--short` is a plain flag, so False means "not given"
    resolved_short = bool(short) or bool(global_config.get_short(file_config))

    resolved_max_chars = _first_set(max_chars, global_config.get_max_chars(file_config), DEFAULT_MAX_CHARS)
    if resolved_max_chars <= 0:
        raise ConfigError(f"max_chars must be positive, got {resolved_max_chars}")

    try:
        return ChangelogConfig(
            short=resolved_short,
            temperature=_first_set(temperature, global_config.get_temperature(file_config), DEFAULT_TEMPERATURE),
            frequency_penalty=_first_set(
                frequency_penalty,
                global_config.get_frequency_penalty(file_config),
                DEFAULT_FREQUENCY_PENALTY,
            ),
            model=_first_set(model, global_config.get_model(file_config), DEFAULT_MODEL),
            api_key=api_key,
            rev_range=rev_range,
            max_chars=resolved_max_chars,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")


def out_of_range_warnings(config: ChangelogConfig) -> list[str]:
    """List warnings for values outside the range the API documents.

    Such values are still sent as-is; the API decides whether to reject them.
    """
    warnings = []

    low, high = TEMPERATURE_RANGE
    if not low <= config.temperature <= high:
        warnings.append(f"temperature {config.temperature} is outside [{low}, {high}]")

    low, high = FREQUENCY_PENALTY_RANGE
    if not low <= config.frequency_penalty <= high:
        warnings.append(f"frequency penalty {config.frequency_penalty} is outside [{low}, {high}]")

    return warnings
