"""
app/domain package marker.
"""

from app.domain.records import FieldValue, Record, ValueKind, parse_number, read_field, split_list
from app.domain.schema import (
    CLIENT_SCHEMA,
    SCHEMAS,
    TASK_SCHEMA,
    WORKER_SCHEMA,
    EntityKind,
    EntitySchema,
    FieldSpec,
    FieldType,
    UnknownEntityKindError,
    resolve_entity_kind,
    schema_for,
)
from app.domain.validation import (
    DatasetValidation,
    Severity,
    ValidationIssue,
    ValidationReport,
    ValidationSummary,
)

__all__ = [
    "CLIENT_SCHEMA",
    "DatasetValidation",
    "EntityKind",
    "EntitySchema",
    "FieldSpec",
    "FieldType",
    "FieldValue",
    "Record",
    "SCHEMAS",
    "Severity",
    "TASK_SCHEMA",
    "UnknownEntityKindError",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSummary",
    "ValueKind",
    "WORKER_SCHEMA",
    "parse_number",
    "read_field",
    "resolve_entity_kind",
    "schema_for",
    "split_list",
]
