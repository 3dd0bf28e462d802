"""
app/api/routers/rules_router.py

Rule suggestion, rule drafting and data-quality endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from allocation_rules.data_quality import suggest_data_quality
from allocation_rules.suggestions import suggest_rule_details
from allocation_rules.templates import natural_language_to_rule
from app.api.dependencies import resolve_entity_or_400
from app.schemas.rules import (
    DataQualityRequest,
    DataQualityResponse,
    DataQualitySuggestionResponse,
    RuleDraftResponse,
    RuleFromTextRequest,
    RuleSuggestionResponse,
    RuleSuggestRequest,
    RuleSuggestResponse,
)

router = APIRouter(tags=["rules"])


@router.post(
    "/rules/suggest",
    response_model=RuleSuggestResponse,
    status_code=status.HTTP_200_OK,
)
def suggest_rules(body: RuleSuggestRequest) -> RuleSuggestResponse:
    suggestions = suggest_rule_details(body.clients, body.workers, body.tasks)
    return RuleSuggestResponse(
        suggestions=[
            RuleSuggestionResponse(message=suggestion.message, trigger=suggestion.trigger)
            for suggestion in suggestions
        ]
    )


@router.post(
    "/rules/from-text",
    response_model=RuleDraftResponse,
    status_code=status.HTTP_200_OK,
)
def rule_from_text(body: RuleFromTextRequest) -> RuleDraftResponse:
    """
    Turn a plain-language rule description into a rule draft.
    """
    draft = natural_language_to_rule(body.description)
    return RuleDraftResponse(**draft.to_dict())


@router.post(
    "/data-quality",
    response_model=DataQualityResponse,
    status_code=status.HTTP_200_OK,
)
def data_quality(body: DataQualityRequest) -> DataQualityResponse:
    """
    Report missing critical values and non-numeric numeric columns.

    Raises HTTP 400 for an unknown ``entity``.
    """
    kind = resolve_entity_or_400(body.entity)
    findings = suggest_data_quality(body.records, kind)
    return DataQualityResponse(
        entity=kind.value,
        suggestions=[
            DataQualitySuggestionResponse(
                issue=finding.issue,
                suggestion=finding.suggestion,
                auto_fix_available=finding.auto_fix_available,
                confidence=finding.confidence,
            )
            for finding in findings
        ],
    )
