"""
app/validators/checks.py

Single-purpose record checks. Each check returns the issues it found and
never raises for bad content.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from app.domain.records import FieldValue, ValueKind, cell_text, is_blank
from app.domain.schema import FieldSpec, FieldType
from app.domain.validation import Severity, ValidationIssue

REFERENCE_SUGGESTION_LIMIT = 3


def _format_bound(value: float) -> str:
    return f"{value:g}"


def check_required(value: Any, field_name: str, row: int) -> ValidationIssue | None:
    """
    Fail when the cell is missing or blank after trimming.
    """

    if is_blank(value):
        return ValidationIssue(
            row=row,
            column=field_name,
            message=f"{field_name} is required",
            severity=Severity.ERROR,
            suggestion=f"Add a value for {field_name}",
        )
    return None


def check_type(value: FieldValue, spec: FieldSpec, row: int) -> ValidationIssue | None:
    """
    Fail when a non-empty numeric cell does not parse as a number.
    """

    if not spec.is_numeric or not value.is_malformed:
        return None
    if spec.field_type is FieldType.INTEGER_LIST:
        return ValidationIssue(
            row=row,
            column=spec.name,
            message=f"{spec.name} must be a number or comma-separated numbers",
            severity=Severity.ERROR,
            suggestion=f'Use numbers such as "1,3,5" for {spec.name}',
        )
    return ValidationIssue(
        row=row,
        column=spec.name,
        message=f"{spec.name} must be a number",
        severity=Severity.ERROR,
        suggestion=f"Enter a valid number for {spec.name}",
    )


def check_range(value: FieldValue, spec: FieldSpec, row: int) -> ValidationIssue | None:
    """
    Warn when a parsed number falls outside the field's soft bounds.
    """

    if spec.bounds is None or value.kind is not ValueKind.NUMBER or value.number is None:
        return None
    low, high = spec.bounds
    if low <= value.number <= high:
        return None
    low_text, high_text = _format_bound(low), _format_bound(high)
    return ValidationIssue(
        row=row,
        column=spec.name,
        message=f"{spec.name} must be between {low_text} and {high_text}",
        severity=Severity.WARNING,
        suggestion=f"Adjust {spec.name} to be within range {low_text}-{high_text}",
    )


def check_reference(
    value: FieldValue,
    spec: FieldSpec,
    row: int,
    allowed: Sequence[str],
) -> list[ValidationIssue]:
    """
    Fail for each present value (or list item) outside the allowed set.

    Comparison is case-insensitive on trimmed values.
    """

    if value.is_absent:
        return []
    candidates = value.items if value.kind is ValueKind.LIST else (str(value.raw).strip(),)
    allowed_keys = {item.strip().casefold() for item in allowed}
    hint = ", ".join(allowed[:REFERENCE_SUGGESTION_LIMIT])
    if len(allowed) > REFERENCE_SUGGESTION_LIMIT:
        hint += "..."

    issues: list[ValidationIssue] = []
    for candidate in candidates:
        if candidate.casefold() in allowed_keys:
            continue
        issues.append(
            ValidationIssue(
                row=row,
                column=spec.name,
                message=f"{spec.name} references invalid value: {candidate}",
                severity=Severity.ERROR,
                suggestion=f"Use one of: {hint}",
            )
        )
    return issues


def check_duplicates(values: Sequence[Any], field_name: str) -> list[ValidationIssue]:
    """
    Flag every row whose identifier was already seen at an earlier row.

    Keys are trimmed and case-insensitive; blank values are ignored and the
    first occurrence is never flagged.
    """

    issues: list[ValidationIssue] = []
    seen: set[str] = set()
    for row, value in enumerate(values):
        text = cell_text(value)
        if text is None or text.strip() == "":
            continue
        key = text.strip().casefold()
        if key in seen:
            issues.append(
                ValidationIssue(
                    row=row,
                    column=field_name,
                    message=f"Duplicate {field_name}: {text.strip()}",
                    severity=Severity.ERROR,
                    suggestion=f"Make {field_name} unique or remove duplicate",
                )
            )
        else:
            seen.add(key)
    return issues


def collect_reference_set(values: Iterable[Any]) -> tuple[str, ...]:
    """
    Distinct non-blank trimmed values, first-seen order, case-insensitive.
    """

    ordered: list[str] = []
    seen: set[str] = set()
    for value in values:
        text = cell_text(value)
        if text is None:
            continue
        stripped = text.strip()
        if not stripped or stripped.casefold() in seen:
            continue
        seen.add(stripped.casefold())
        ordered.append(stripped)
    return tuple(ordered)
