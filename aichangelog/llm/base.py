"""Shared result type for changelog generation."""

from dataclasses import dataclass


@dataclass
class ChangelogResult:
    """Result from a changelog generation call, including token usage."""

    changelog: str
    model: str
    input_tokens: int
    output_tokens: int
