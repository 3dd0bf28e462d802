"""
app/schemas/insight.py

Schemas for free-form insight requests.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class InsightRequest(BaseModel):
    prompt: str = Field(..., min_length=1)
    clients: list[dict[str, Any]] = Field(default_factory=list)
    workers: list[dict[str, Any]] = Field(default_factory=list)
    tasks: list[dict[str, Any]] = Field(default_factory=list)


class InsightResponse(BaseModel):
    response: str
