"""
app/api/routers/query_router.py

Natural-language record filtering endpoint.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, status

from app.api.dependencies import resolve_entity_or_400
from app.schemas.query import QueryRequest, QueryResponse
from query_intent.intents import apply_intent
from query_intent.parser import interpret

router = APIRouter(tags=["query"])


@router.post(
    "/query",
    response_model=QueryResponse,
    status_code=status.HTTP_200_OK,
)
def query_records(body: QueryRequest) -> QueryResponse:
    """
    Interpret ``query`` for one entity kind and return the matching records.

    Raises HTTP 400 for an unknown ``entity``.
    """
    kind = resolve_entity_or_400(body.entity)
    intent = interpret(body.query, kind)
    matches = apply_intent(intent, body.records)
    return QueryResponse(
        entity=kind.value,
        intent=type(intent).__name__,
        parameters=asdict(intent),
        count=len(matches),
        records=matches,
    )
