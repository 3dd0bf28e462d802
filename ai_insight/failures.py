"""Classification of reasoning-service failures into user-facing messages.

Categories are chosen purely from the failure's message text.
"""

from enum import Enum
from typing import Optional

UNREACHABLE_MESSAGE = (
    "I'm currently unable to connect to the AI service. "
    "Please check your configuration and try again."
)


class FailureCategory(str, Enum):
    CONFIGURATION = "configuration"
    QUOTA = "quota"
    RATE_LIMIT = "rate_limit"
    GENERIC = "generic"


def classify_failure(message: str) -> FailureCategory:
    """Map a failure message to its category.

    Checks run in a fixed order: API key, quota or billing, rate limit.
    Matching is case-insensitive.
    """
    lowered = message.lower()
    if "api key" in lowered:
        return FailureCategory.CONFIGURATION
    if "quota" in lowered or "billing" in lowered:
        return FailureCategory.QUOTA
    if "rate limit" in lowered:
        return FailureCategory.RATE_LIMIT
    return FailureCategory.GENERIC


def fallback_message(error: Optional[BaseException]) -> str:
    """Build the descriptive reply returned in place of an insight.

    Args:
        error: The failure raised while calling the service, if any.

    Returns:
        A user-facing message that embeds the original error text.
    """
    if error is None:
        return UNREACHABLE_MESSAGE

    message = str(error)
    category = classify_failure(message)
    if category is FailureCategory.CONFIGURATION:
        return (
            "API Configuration Issue: Please check your API key configuration. "
            f"Original error: {message}"
        )
    if category is FailureCategory.QUOTA:
        return (
            "AI API quota exceeded or billing issue. Please check your provider account. "
            f"Original error: {message}"
        )
    if category is FailureCategory.RATE_LIMIT:
        return f"Rate limit exceeded. Please wait a moment and try again. Original error: {message}"
    return (
        f"AI service encountered an issue: {message}. "
        "Please check your internet connection or try again later."
    )
