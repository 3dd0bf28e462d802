"""
app/api/routers/insight_router.py

Free-form insight endpoint backed by the configured LLM adapter.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from ai_insight.adapter import BaseLLMAdapter
from ai_insight.service import request_insight
from app.api.dependencies import get_insight_adapter
from app.schemas.insight import InsightRequest, InsightResponse

router = APIRouter(tags=["insight"])


@router.post(
    "/insight",
    response_model=InsightResponse,
    status_code=status.HTTP_200_OK,
)
def generate_insight(
    body: InsightRequest,
    adapter: Optional[BaseLLMAdapter] = Depends(get_insight_adapter),
) -> InsightResponse:
    """
    Ask the reasoning service about the supplied records.

    Upstream failures are returned as a descriptive message with HTTP 200.
    """
    return InsightResponse(
        response=request_insight(body.prompt, body.clients, body.workers, body.tasks, adapter=adapter)
    )
