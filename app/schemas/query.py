"""
app/schemas/query.py

Schemas for natural-language record filtering.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    entity: str
    query: str
    records: list[dict[str, Any]] = Field(default_factory=list)


class QueryResponse(BaseModel):
    """
    Filtered records plus the intent that selected them.
    """

    entity: str
    intent: str
    parameters: dict[str, Any] = Field(default_factory=dict)
    count: int = Field(..., ge=0)
    records: list[dict[str, Any]] = Field(default_factory=list)
