"""
app/schemas package marker.
"""

from app.schemas.columns import ColumnMappingResponse, ColumnMapRequest, ColumnMapResponse
from app.schemas.insight import InsightRequest, InsightResponse
from app.schemas.query import QueryRequest, QueryResponse
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
from app.schemas.validation import (
    DatasetValidationRequest,
    DatasetValidationResponse,
    ValidationIssueResponse,
    ValidationReportResponse,
    ValidationRequest,
    ValidationSummaryResponse,
)

__all__ = [
    "ColumnMapRequest",
    "ColumnMapResponse",
    "ColumnMappingResponse",
    "DataQualityRequest",
    "DataQualityResponse",
    "DataQualitySuggestionResponse",
    "DatasetValidationRequest",
    "DatasetValidationResponse",
    "InsightRequest",
    "InsightResponse",
    "QueryRequest",
    "QueryResponse",
    "RuleDraftResponse",
    "RuleFromTextRequest",
    "RuleSuggestRequest",
    "RuleSuggestResponse",
    "RuleSuggestionResponse",
    "ValidationIssueResponse",
    "ValidationReportResponse",
    "ValidationRequest",
    "ValidationSummaryResponse",
]
