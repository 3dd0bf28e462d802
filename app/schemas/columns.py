"""
app/schemas/columns.py

Schemas for column header reconciliation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ColumnMapRequest(BaseModel):
    headers: list[str] = Field(default_factory=list)


class ColumnMappingResponse(BaseModel):
    original: str
    suggested: str
    field_name: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class ColumnMapResponse(BaseModel):
    mappings: list[ColumnMappingResponse] = Field(default_factory=list)
    unmapped: list[str] = Field(default_factory=list)
