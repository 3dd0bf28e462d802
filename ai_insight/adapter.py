"""LLM adapters for free-form allocation insights.

Provides a base interface and concrete adapters for OpenAI-compatible
chat APIs (OpenRouter by default) and a deterministic mock for testing.
"""

from abc import ABC, abstractmethod
from typing import Optional


class InsightUnavailableError(RuntimeError):
    """Raised when the reasoning service answers without any content."""


class BaseLLMAdapter(ABC):
    """Abstract base for all LLM adapters."""

    @abstractmethod
    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Send a system and user message pair and return the reply text.

        Args:
            system_prompt: Instructions describing the analyst role.
            user_prompt: Entity context followed by the user's query.

        Returns:
            The model's reply as plain text.

        Raises:
            InsightUnavailableError: If the model returned no content.
        """


class OpenAILLMAdapter(BaseLLMAdapter):
    """Adapter for OpenAI-compatible chat completion APIs."""

    def __init__(
        self,
        model: str = "mistralai/mistral-7b-instruct",
        max_tokens: int = 1500,
        temperature: float = 0.7,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        """Initialise the OpenAI-compatible adapter.

        Args:
            model: Model identifier understood by the endpoint.
            max_tokens: Maximum tokens in the completion.
            temperature: Sampling temperature.
            api_key: API key for the endpoint.
            base_url: Optional base URL for OpenAI-compatible endpoints.
        """
        try:
            from openai import OpenAI  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError(
                "openai package is required for OpenAILLMAdapter. "
                "Install it with: pip install openai"
            ) from exc

        client_kwargs: dict = {"api_key": api_key or ""}
        if base_url:
            client_kwargs["base_url"] = base_url

        self._client = OpenAI(**client_kwargs)
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            stream=False,
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise InsightUnavailableError("No response content from AI.")
        return content


_MOCK_RESPONSE = (
    "Mock insight for testing purposes. Match high-priority client tasks to "
    "workers whose skills cover the required skills, and keep per-phase load "
    "under each worker's MaxLoadPerPhase."
)


class MockLLMAdapter(BaseLLMAdapter):
    """Deterministic adapter that returns a fixed reply.

    Used for local runs and tests where no LLM API is available.
    """

    def __init__(self, response: str = _MOCK_RESPONSE) -> None:
        self._response = response
        self.calls: list = []

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Record the call and return the fixed reply regardless of input."""
        self.calls.append((system_prompt, user_prompt))
        return self._response
