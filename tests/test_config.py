from __future__ import annotations

import os
from pathlib import Path

import pytest

from app import config
from app.config import get_heuristic_settings, get_insight_settings, get_mapping_settings, load_env_files

_ENV_NAMES = (
    "HEURISTIC_HIGH_PRIORITY_LEVEL",
    "HEURISTIC_HIGH_PRIORITY_RATIO",
    "COLUMN_MAPPING_THRESHOLD",
    "COLUMN_MAPPING_MAX_HEADER_LENGTH",
    "LLM_ADAPTER",
    "LLM_MODEL",
    "LLM_API_KEY",
    "OPENROUTER_API_KEY",
    "OPENAI_API_KEY",
    "LLM_BASE_URL",
    "LLM_TEMPERATURE",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    get_heuristic_settings.cache_clear()
    get_mapping_settings.cache_clear()
    get_insight_settings.cache_clear()
    yield
    get_heuristic_settings.cache_clear()
    get_mapping_settings.cache_clear()
    get_insight_settings.cache_clear()


def test_defaults() -> None:
    heuristics = get_heuristic_settings()
    mapping = get_mapping_settings()
    insight = get_insight_settings()

    assert heuristics == config.HeuristicSettings()
    assert mapping.confidence_threshold == 0.5
    assert mapping.max_header_length == 128
    assert insight.adapter == "openai"
    assert insight.model == "mistralai/mistral-7b-instruct"
    assert insight.base_url == "https://openrouter.ai/api/v1"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HEURISTIC_HIGH_PRIORITY_LEVEL", "5")
    monkeypatch.setenv("LLM_ADAPTER", "MOCK")
    monkeypatch.setenv("LLM_MODEL", "gpt-4o-mini")

    assert get_heuristic_settings().high_priority_level == 5
    assert get_insight_settings().adapter == "mock"
    assert get_insight_settings().model == "gpt-4o-mini"


def test_bad_values_fall_back_or_clamp(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HEURISTIC_HIGH_PRIORITY_LEVEL", "abc")
    monkeypatch.setenv("HEURISTIC_HIGH_PRIORITY_RATIO", "1.7")
    monkeypatch.setenv("COLUMN_MAPPING_THRESHOLD", "-2")
    monkeypatch.setenv("COLUMN_MAPPING_MAX_HEADER_LENGTH", "0")
    monkeypatch.setenv("LLM_ADAPTER", "bogus")
    monkeypatch.setenv("LLM_TEMPERATURE", "9")

    assert get_heuristic_settings().high_priority_level == 4
    assert get_heuristic_settings().high_priority_ratio == 1.0
    assert get_mapping_settings().confidence_threshold == 0.0
    assert get_mapping_settings().max_header_length == 1
    assert get_insight_settings().adapter == "openai"
    assert get_insight_settings().temperature == 2.0


def test_api_key_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "openai-key")
    monkeypatch.setenv("OPENROUTER_API_KEY", "openrouter-key")
    assert get_insight_settings().api_key == "openrouter-key"

    get_insight_settings.cache_clear()
    monkeypatch.setenv("LLM_API_KEY", "  ")
    assert get_insight_settings().api_key == "openrouter-key"

    get_insight_settings.cache_clear()
    monkeypatch.setenv("LLM_API_KEY", "llm-key")
    assert get_insight_settings().api_key == "llm-key"


def test_load_env_files_does_not_overwrite(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_MODEL", "from-process")
    monkeypatch.delenv("WORKBENCH_TEST_VALUE", raising=False)
    (tmp_path / ".env").write_text(
        "# comment\nLLM_MODEL=from-file\nWORKBENCH_TEST_VALUE=\"quoted\"\nnot a pair\n",
        encoding="utf-8",
    )

    load_env_files(tmp_path)

    assert os.environ["LLM_MODEL"] == "from-process"
    assert os.environ["WORKBENCH_TEST_VALUE"] == "quoted"
    monkeypatch.delenv("WORKBENCH_TEST_VALUE")
