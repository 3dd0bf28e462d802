"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, TypeVar

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ALLOWED_LLM_ADAPTERS = {"openai", "mock"}


def load_env_files(project_root: Path | None = None) -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    root = project_root or _PROJECT_ROOT
    for filename in (".env", ".env.local"):
        env_path = root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


_Number = TypeVar("_Number", int, float)


def _get_number_env(
    name: str,
    default: _Number,
    cast: Callable[[str], _Number],
    minimum: _Number | None = None,
    maximum: _Number | None = None,
) -> _Number:
    """
    Read a number from the environment, falling back on bad input and
    clamping to the given bounds.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    value = default
    if raw_value is not None:
        try:
            value = cast(raw_value)
        except ValueError:
            value = default
    if minimum is not None:
        value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value


def _get_optional_str_env(*names: str) -> str | None:
    """
    Read the first non-empty string among several environment variables.
    """

    _load_env_once()
    for name in names:
        value = os.getenv(name)
        if value is None:
            continue
        stripped = value.strip()
        if stripped:
            return stripped
    return None


@dataclass(frozen=True)
class HeuristicSettings:
    """
    Thresholds used by rule suggestions and validation recommendations.
    """

    high_priority_level: int = 4
    high_priority_ratio: float = 0.3
    limited_slots_mean: float = 20.0
    long_task_duration: int = 3
    high_error_rate: float = 0.1


@dataclass(frozen=True)
class MappingSettings:
    """
    Runtime settings for column header reconciliation.
    """

    confidence_threshold: float = 0.5
    max_header_length: int = 128


@dataclass(frozen=True)
class InsightSettings:
    """
    Remote reasoning service settings.
    """

    adapter: str = "openai"
    model: str = "mistralai/mistral-7b-instruct"
    api_key: str | None = None
    base_url: str | None = "https://openrouter.ai/api/v1"
    max_tokens: int = 1500
    temperature: float = 0.7


@lru_cache(maxsize=1)
def get_heuristic_settings() -> HeuristicSettings:
    """
    Return cached heuristic thresholds from environment variables.
    """

    return HeuristicSettings(
        high_priority_level=_get_number_env("HEURISTIC_HIGH_PRIORITY_LEVEL", 4, int),
        high_priority_ratio=_get_number_env("HEURISTIC_HIGH_PRIORITY_RATIO", 0.3, float, 0.0, 1.0),
        limited_slots_mean=_get_number_env("HEURISTIC_LIMITED_SLOTS_MEAN", 20.0, float, 0.0),
        long_task_duration=_get_number_env("HEURISTIC_LONG_TASK_DURATION", 3, int),
        high_error_rate=_get_number_env("HEURISTIC_HIGH_ERROR_RATE", 0.1, float, 0.0),
    )


@lru_cache(maxsize=1)
def get_mapping_settings() -> MappingSettings:
    """
    Return cached column mapping settings from environment variables.
    """

    return MappingSettings(
        confidence_threshold=_get_number_env("COLUMN_MAPPING_THRESHOLD", 0.5, float, 0.0, 1.0),
        max_header_length=_get_number_env("COLUMN_MAPPING_MAX_HEADER_LENGTH", 128, int, 1),
    )


@lru_cache(maxsize=1)
def get_insight_settings() -> InsightSettings:
    """
    Return cached insight service settings from environment variables.

    Unknown LLM_ADAPTER values fall back to the OpenAI-compatible adapter.
    """

    adapter = (_get_optional_str_env("LLM_ADAPTER") or "openai").lower()
    if adapter not in _ALLOWED_LLM_ADAPTERS:
        adapter = "openai"
    return InsightSettings(
        adapter=adapter,
        model=_get_optional_str_env("LLM_MODEL") or "mistralai/mistral-7b-instruct",
        api_key=_get_optional_str_env("LLM_API_KEY", "OPENROUTER_API_KEY", "OPENAI_API_KEY"),
        base_url=_get_optional_str_env("LLM_BASE_URL") or "https://openrouter.ai/api/v1",
        max_tokens=_get_number_env("LLM_MAX_TOKENS", 1500, int, 1),
        temperature=_get_number_env("LLM_TEMPERATURE", 0.7, float, 0.0, 2.0),
    )
