"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- UpstreamAPIError: Raised when the API call fails or returns an error status
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class UpstreamAPIError(LLMError):
    """Raised when the OpenAI API returns an error or cannot be reached."""

    pass
