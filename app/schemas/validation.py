"""
app/schemas/validation.py

Request and response schemas for record validation endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from app.domain.validation import ValidationIssue, ValidationReport
from app.validators.recommendations import quick_fixes


class ValidationRequest(BaseModel):
    entity: str = Field(..., description="clients, workers or tasks")
    records: list[dict[str, Any]] = Field(default_factory=list)


class DatasetValidationRequest(BaseModel):
    clients: list[dict[str, Any]] = Field(default_factory=list)
    workers: list[dict[str, Any]] = Field(default_factory=list)
    tasks: list[dict[str, Any]] = Field(default_factory=list)


class ValidationIssueResponse(BaseModel):
    """
    API response model for one row-level validation issue.
    """

    row: int = Field(..., ge=0)
    column: str
    message: str
    severity: str
    suggestion: str | None = None
    quick_fixes: list[str] = Field(default_factory=list)

    @classmethod
    def from_issue(cls, issue: ValidationIssue) -> "ValidationIssueResponse":
        return cls(**issue.to_dict(), quick_fixes=quick_fixes(issue))


class ValidationSummaryResponse(BaseModel):
    total_rows: int = Field(..., ge=0)
    error_count: int = Field(..., ge=0)
    warning_count: int = Field(..., ge=0)


class ValidationReportResponse(BaseModel):
    """
    API response model for one entity's validation report.
    """

    entity: str
    is_valid: bool
    errors: list[ValidationIssueResponse] = Field(default_factory=list)
    warnings: list[ValidationIssueResponse] = Field(default_factory=list)
    summary: ValidationSummaryResponse
    recommendations: list[str] = Field(default_factory=list)

    @classmethod
    def from_report(
        cls,
        entity: str,
        report: ValidationReport,
        recommendations: list[str],
    ) -> "ValidationReportResponse":
        return cls(
            entity=entity,
            is_valid=report.is_valid,
            errors=[ValidationIssueResponse.from_issue(issue) for issue in report.errors],
            warnings=[ValidationIssueResponse.from_issue(issue) for issue in report.warnings],
            summary=ValidationSummaryResponse(
                total_rows=report.summary.total_rows,
                error_count=report.summary.error_count,
                warning_count=report.summary.warning_count,
            ),
            recommendations=recommendations,
        )


class DatasetValidationResponse(BaseModel):
    is_valid: bool
    clients: ValidationReportResponse
    workers: ValidationReportResponse
    tasks: ValidationReportResponse
    reference_sets: dict[str, list[str]] = Field(default_factory=dict)
