"""
app/api/dependencies.py

Shared FastAPI dependencies and request helpers.
"""

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, status

from ai_insight.adapter import BaseLLMAdapter
from app.domain.schema import EntityKind, UnknownEntityKindError, resolve_entity_kind
from app.mappers.column_mapper import ColumnMapper


def resolve_entity_or_400(value: str) -> EntityKind:
    """
    Resolve an entity kind from a request body, raising HTTP 400 when unknown.
    """

    try:
        return resolve_entity_kind(value)
    except UnknownEntityKindError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": str(exc),
                "entity": str(exc.value),
                "allowed": list(exc.allowed),
            },
        ) from exc


def get_column_mapper() -> ColumnMapper:
    return ColumnMapper()


def get_insight_adapter() -> Optional[BaseLLMAdapter]:
    """
    Adapter override for insight requests.

    Returns None so the insight service builds the configured adapter inside
    its failure handling. Tests override this dependency with a mock.
    """

    return None
