"""
allocation_rules/data_quality.py

Column-level data-quality checks with fixed confidence scores.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Mapping, Sequence

from app.domain.records import Record, is_blank, parse_number, split_list
from app.domain.schema import EntityKind, resolve_entity_kind

_MISSING_CONFIDENCE = 0.9

CRITICAL_FIELDS: Mapping[EntityKind, tuple[str, ...]] = MappingProxyType(
    {
        EntityKind.CLIENTS: ("ClientID", "ClientName", "PriorityLevel"),
        EntityKind.WORKERS: ("WorkerID", "WorkerName", "Skills", "AvailableSlots", "MaxLoadPerPhase"),
        EntityKind.TASKS: ("TaskID", "TaskName", "Duration", "RequiredSkills"),
    }
)


@dataclass(frozen=True)
class NumericColumnCheck:
    field: str
    issue: str
    suggestion: str
    confidence: float
    allows_list: bool = False


NUMERIC_COLUMN_CHECKS: Mapping[EntityKind, tuple[NumericColumnCheck, ...]] = MappingProxyType(
    {
        EntityKind.CLIENTS: (
            NumericColumnCheck(
                field="PriorityLevel",
                issue="PriorityLevel column contains non-numeric values",
                suggestion="Convert priority levels to numbers (1-10 scale)",
                confidence=0.8,
            ),
        ),
        EntityKind.WORKERS: (
            NumericColumnCheck(
                field="AvailableSlots",
                issue="AvailableSlots column contains non-numeric values or invalid format",
                suggestion=(
                    "Ensure available slots are numbers or a comma-separated list of phase numbers "
                    '(e.g., "1,3,5")'
                ),
                confidence=0.8,
                allows_list=True,
            ),
            NumericColumnCheck(
                field="MaxLoadPerPhase",
                issue="MaxLoadPerPhase column contains non-numeric values",
                suggestion="Convert max load per phase to numbers",
                confidence=0.7,
            ),
            NumericColumnCheck(
                field="QualificationLevel",
                issue="QualificationLevel column contains non-numeric values",
                suggestion="Convert qualification levels to numbers (1-10 scale)",
                confidence=0.7,
            ),
        ),
        EntityKind.TASKS: (
            NumericColumnCheck(
                field="Duration",
                issue="Duration column contains non-numeric values",
                suggestion="Convert duration to numbers (e.g., number of phases)",
                confidence=0.8,
            ),
            NumericColumnCheck(
                field="MaxConcurrent",
                issue="MaxConcurrent column contains non-numeric values",
                suggestion="Convert max concurrent to numbers",
                confidence=0.7,
            ),
        ),
    }
)


@dataclass(frozen=True)
class DataQualitySuggestion:
    issue: str
    suggestion: str
    auto_fix_available: bool
    confidence: float


def _is_non_numeric(value: Any, allows_list: bool) -> bool:
    if allows_list:
        items = split_list(value)
        return not items or any(parse_number(item) is None for item in items)
    return parse_number(value) is None


def suggest_data_quality(
    records: Sequence[Record],
    kind: EntityKind | str,
) -> List[DataQualitySuggestion]:
    """
    Report missing critical values and numeric columns holding non-numbers.

    Missing-value findings come first, in critical-field order, followed by
    the numeric column checks for the entity kind.
    """
    entity_kind = resolve_entity_kind(kind)
    suggestions: List[DataQualitySuggestion] = []

    for field in CRITICAL_FIELDS[entity_kind]:
        missing_count = sum(1 for record in records if is_blank(record.get(field)))
        if missing_count > 0:
            suggestions.append(
                DataQualitySuggestion(
                    issue=f"{missing_count} rows missing {field}",
                    suggestion=f"Add {field} values or remove incomplete rows",
                    auto_fix_available=False,
                    confidence=_MISSING_CONFIDENCE,
                )
            )

    for check in NUMERIC_COLUMN_CHECKS[entity_kind]:
        present = [record.get(check.field) for record in records if not is_blank(record.get(check.field))]
        if any(_is_non_numeric(value, check.allows_list) for value in present):
            suggestions.append(
                DataQualitySuggestion(
                    issue=check.issue,
                    suggestion=check.suggestion,
                    auto_fix_available=True,
                    confidence=check.confidence,
                )
            )

    return suggestions
