"""
app/schemas/rules.py

Schemas for rule suggestions, rule drafts and data-quality findings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RuleSuggestRequest(BaseModel):
    clients: list[dict[str, Any]] = Field(default_factory=list)
    workers: list[dict[str, Any]] = Field(default_factory=list)
    tasks: list[dict[str, Any]] = Field(default_factory=list)


class RuleSuggestionResponse(BaseModel):
    message: str
    trigger: str


class RuleSuggestResponse(BaseModel):
    suggestions: list[RuleSuggestionResponse] = Field(default_factory=list)


class RuleFromTextRequest(BaseModel):
    description: str = Field(..., min_length=1)


class RuleDraftResponse(BaseModel):
    type: str
    condition: str
    action: str
    description: str


class DataQualityRequest(BaseModel):
    entity: str
    records: list[dict[str, Any]] = Field(default_factory=list)


class DataQualitySuggestionResponse(BaseModel):
    issue: str
    suggestion: str
    auto_fix_available: bool
    confidence: float = Field(..., ge=0.0, le=1.0)


class DataQualityResponse(BaseModel):
    entity: str
    suggestions: list[DataQualitySuggestionResponse] = Field(default_factory=list)
