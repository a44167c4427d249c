"""LLM module for aichangelog.

Turns a list of commit messages into a Markdown changelog with one
OpenAI chat completions call.
"""

from aichangelog.config import ChangelogConfig
from aichangelog.llm.base import ChangelogResult
from aichangelog.llm.exceptions import LLMError, UpstreamAPIError
from aichangelog.llm.openai_provider import OpenAIProvider
from aichangelog.llm.prompts import build_user_prompt


def get_provider(config: ChangelogConfig) -> OpenAIProvider:
    """Get an OpenAI provider configured for this run."""
    return OpenAIProvider(
        api_key=config.api_key,
        model=config.model,
        temperature=config.temperature,
        frequency_penalty=config.frequency_penalty,
    )


def generate_changelog(messages: list[str], rev_range: str, config: ChangelogConfig) -> ChangelogResult:
    """Generate a Markdown changelog from commit messages.

    This is the main entry point for changelog generation.

    Args:
        messages: Commit messages from get_commit_messages().
        rev_range: The revision range the messages came from.
        config: The resolved run configuration.

    Returns:
        A ChangelogResult containing the changelog and token usage.

    Raises:
        UpstreamAPIError: If the API call fails.
        LLMError: For other LLM-related errors.
    """
    user_prompt = build_user_prompt(messages, rev_range, max_chars=config.max_chars)
    return get_provider(config).generate(user_prompt)


# Export commonly used items
__all__ = [
    "ChangelogResult",
    "LLMError",
    "UpstreamAPIError",
    "OpenAIProvider",
    "get_provider",
    "generate_changelog",
]
