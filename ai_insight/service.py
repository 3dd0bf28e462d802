"""Insight request service.

Builds the prompt, calls the configured adapter once and turns any
upstream failure into a descriptive fallback reply.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from ai_insight.adapter import BaseLLMAdapter, MockLLMAdapter, OpenAILLMAdapter
from ai_insight.failures import classify_failure, fallback_message
from ai_insight.prompt_builder import InsightPromptBuilder
from app.config import InsightSettings, get_insight_settings

logger = logging.getLogger(__name__)


def build_adapter(settings: Optional[InsightSettings] = None) -> BaseLLMAdapter:
    """Create the adapter named by ``settings.adapter``.

    Args:
        settings: Insight settings. Defaults to the environment-driven ones.

    Returns:
        A mock adapter for ``mock``, otherwise an OpenAI-compatible adapter.
    """
    resolved = settings or get_insight_settings()
    if resolved.adapter == "mock":
        return MockLLMAdapter()
    return OpenAILLMAdapter(
        model=resolved.model,
        max_tokens=resolved.max_tokens,
        temperature=resolved.temperature,
        api_key=resolved.api_key,
        base_url=resolved.base_url,
    )


def request_insight(
    prompt: str,
    clients: Sequence[Mapping[str, Any]],
    workers: Sequence[Mapping[str, Any]],
    tasks: Sequence[Mapping[str, Any]],
    adapter: Optional[BaseLLMAdapter] = None,
) -> str:
    """Ask the reasoning service about the loaded data.

    The reply is passed through untouched. Failures never propagate: they
    are classified by message text and replaced with a fallback string.

    Args:
        prompt: The user's question.
        clients: Client records.
        workers: Worker records.
        tasks: Task records.
        adapter: Adapter to call. Built from settings when omitted.

    Returns:
        The model's reply or a fallback message.
    """
    builder = InsightPromptBuilder()
    user_prompt = builder.build_user_prompt(prompt, clients, workers, tasks)

    try:
        active = adapter or build_adapter()
        reply = active.generate(builder.system_prompt, user_prompt)
    except Exception as exc:
        category = classify_failure(str(exc))
        logger.warning(
            "Insight request failed (category=%s): %s",
            category.value,
            exc,
        )
        return fallback_message(exc)

    if not reply:
        logger.warning("Insight request returned no content")
        return fallback_message(None)
    return reply
