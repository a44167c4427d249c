"""OpenAI chat completions client for changelog generation."""

from typing import Any, Dict

import openai
from openai import OpenAI

from aichangelog.config import DEFAULT_FREQUENCY_PENALTY, DEFAULT_MODEL, DEFAULT_TEMPERATURE
from aichangelog.llm.base import ChangelogResult
from aichangelog.llm.exceptions import LLMError, UpstreamAPIError
from aichangelog.llm.prompts import SYSTEM_PROMPT


def _upstream_message(error: openai.APIStatusError) -> str:
    """Extract the API's own error message from a status error.

    The SDK's `message` is prefixed with "Error code: ..." and the raw body;
    the body's `message` field is the text the API actually returned.
    """
    body = error.body
    if isinstance(body, dict):
        # The SDK usually unwraps {"error": {...}}, but not for every response
        details = body.get("error", body)
        if isinstance(details, dict) and details.get("message"):
            return str(details["message"])
    return error.message


class OpenAIProvider:
    """OpenAI GPT changelog provider."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        frequency_penalty: float = DEFAULT_FREQUENCY_PENALTY,
    ):
        """Initialize the OpenAI provider.

        Args:
            api_key: The OpenAI API key.
            model: The model to use. Defaults to gpt-3.5-turbo.
            temperature: Sampling temperature, sent unchanged.
            frequency_penalty: Frequency penalty, sent unchanged.
        """
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.frequency_penalty = frequency_penalty

    def build_request(self, user_prompt: str) -> Dict[str, Any]:
        """Build the chat completions request body.

        Args:
            user_prompt: The formatted user prompt.

        Returns:
            Keyword arguments for `client.chat.completions.create`.
        """
        return {
            "model": self.model,
            "temperature": self.temperature,
            "frequency_penalty": self.frequency_penalty,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
        }

    def generate(self, user_prompt: str) -> ChangelogResult:
        """Generate a changelog with a single chat completions call.

        Args:
            user_prompt: The formatted user prompt.

        Returns:
            A ChangelogResult containing the Markdown changelog and token usage.

        Raises:
            UpstreamAPIError: If the API returns an error status or cannot be reached.
            LLMError: If the response holds no text.
        """
        # The SDK retries failed requests by default; one attempt only
        client = OpenAI(api_key=self.api_key, max_retries=0)

        try:
            response = client.chat.completions.create(**self.build_request(user_prompt))
        except openai.APIStatusError as e:
            raise UpstreamAPIError(f"OpenAI API returned HTTP {e.status_code}: {_upstream_message(e)}")
        except openai.APIConnectionError as e:
            raise UpstreamAPIError(f"Could not reach the OpenAI API: {e}")
        except openai.OpenAIError as e:
            raise UpstreamAPIError(f"OpenAI API call failed: {e}")

        if not response.choices:
            raise LLMError("OpenAI API returned no choices.")

        changelog = (response.choices[0].message.content or "").strip()
        if not changelog:
            raise LLMError("OpenAI API returned an empty changelog.")

        usage = response.usage
        return ChangelogResult(
            changelog=changelog,
            model=response.model or self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )
