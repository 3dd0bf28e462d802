"""
app/validators/recommendations.py

Quick fixes for individual issues and overall advice for a validation run.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from app.config import HeuristicSettings, get_heuristic_settings
from app.domain.schema import EntityKind, resolve_entity_kind
from app.domain.validation import ValidationIssue, ValidationReport

_QUICK_FIXES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("is required", ("Fill in the missing value", "Remove this row if data is not available")),
    ("Duplicate", ("Make the value unique", "Remove duplicate row", "Merge duplicate entries")),
    ("must be a number", ("Convert to numeric format", "Remove non-numeric characters")),
    ("must be between", ("Adjust value to be within valid range", "Check if different scale is intended")),
    ("references invalid", ("Use a valid reference value", "Add the referenced item to the system")),
)

# Column whose errors trigger entity-specific advice.
_ENTITY_ADVICE: Mapping[EntityKind, tuple[str, str]] = MappingProxyType(
    {
        EntityKind.CLIENTS: ("PriorityLevel", "Standardize priority levels to 1-10 scale"),
        EntityKind.WORKERS: ("Skills", "Use consistent skill naming and comma separation"),
        EntityKind.TASKS: ("Duration", "Ensure duration is in consistent units (number of phases)"),
    }
)


def quick_fixes(issue: ValidationIssue) -> list[str]:
    """
    Return canned fix actions for one issue, based on its message family.
    """

    fixes: list[str] = []
    for marker, actions in _QUICK_FIXES:
        if marker in issue.message:
            fixes.extend(actions)
    return fixes


def recommendations(
    report: ValidationReport,
    kind: EntityKind | str,
    *,
    settings: HeuristicSettings | None = None,
) -> list[str]:
    """
    Summarize what to fix first for one validation report.
    """

    resolved = settings or get_heuristic_settings()
    entity_kind = resolve_entity_kind(kind)
    summary = report.summary
    advice: list[str] = []

    if summary.error_count > summary.total_rows * resolved.high_error_rate:
        advice.append("Consider reviewing data quality - high error rate detected")

    if any("is required" in error.message for error in report.errors):
        advice.append("Focus on completing required fields first")

    if any(error.message.startswith("Duplicate") for error in report.errors):
        advice.append("Resolve duplicate entries to ensure data integrity")

    column, message = _ENTITY_ADVICE[entity_kind]
    if any(error.column == column for error in report.errors):
        advice.append(message)

    if summary.error_count == 0 and summary.warning_count == 0:
        advice.append("Data quality looks good! Ready for processing.")
    elif summary.error_count == 0:
        advice.append("No critical errors found. Address warnings for optimal results.")

    return advice
