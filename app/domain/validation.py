"""
app/domain/validation.py

Validation result models shared by the validation engine and the API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """
    One problem found in one record cell.
    """

    row: int
    column: str
    message: str
    severity: Severity
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row,
            "column": self.column,
            "message": self.message,
            "severity": self.severity.value,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class ValidationSummary:
    total_rows: int
    error_count: int
    warning_count: int


@dataclass(frozen=True)
class ValidationReport:
    """
    Outcome of one validation run.

    Always build through :meth:`from_issues` so the partition, the counts and
    ``is_valid`` stay derived from the same issue sequence.
    """

    is_valid: bool
    errors: tuple[ValidationIssue, ...]
    warnings: tuple[ValidationIssue, ...]
    summary: ValidationSummary

    @classmethod
    def from_issues(cls, issues: Iterable[ValidationIssue], *, total_rows: int) -> "ValidationReport":
        ordered = tuple(issues)
        errors = tuple(issue for issue in ordered if issue.severity is Severity.ERROR)
        warnings = tuple(issue for issue in ordered if issue.severity is Severity.WARNING)
        return cls(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            summary=ValidationSummary(
                total_rows=total_rows,
                error_count=len(errors),
                warning_count=len(warnings),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
            "summary": {
                "total_rows": self.summary.total_rows,
                "error_count": self.summary.error_count,
                "warning_count": self.summary.warning_count,
            },
        }


@dataclass(frozen=True)
class DatasetValidation:
    """
    Validation reports for a full clients/workers/tasks upload.
    """

    clients: ValidationReport
    workers: ValidationReport
    tasks: ValidationReport
    reference_sets: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.clients.is_valid and self.workers.is_valid and self.tasks.is_valid
