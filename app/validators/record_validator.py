"""
app/validators/record_validator.py

Schema-driven validation of client, worker, and task records.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Sequence

from app.domain.records import Record, read_field, split_list
from app.domain.schema import (
    CLIENT_SCHEMA,
    TASK_SCHEMA,
    WORKER_SCHEMA,
    EntityKind,
    EntitySchema,
    schema_for,
)
from app.domain.validation import DatasetValidation, ValidationIssue, ValidationReport
from app.logging_utils import log_event
from app.validators.checks import (
    check_duplicates,
    check_range,
    check_reference,
    check_required,
    check_type,
    collect_reference_set,
)

logger = logging.getLogger(__name__)


class RecordValidator:
    """
    Applies the fixed per-row checklist for one entity schema.

    Per row, for each field in schema order: required, type, range, and
    (when an allowed set is supplied) reference checks. Duplicate
    identifiers are checked across all rows once every row is done. No row
    is skipped because of an earlier failure.
    """

    def __init__(self, schema: EntitySchema) -> None:
        self._schema = schema

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    def validate(
        self,
        records: Sequence[Record],
        *,
        references: Mapping[str, Sequence[str]] | None = None,
    ) -> ValidationReport:
        issues: list[ValidationIssue] = []
        reference_sets = {
            name: tuple(values)
            for name, values in (references or {}).items()
            if values
        }

        for row, record in enumerate(records):
            issues.extend(self._validate_row(record, row, reference_sets))

        identifiers = [record.get(self._schema.identifier) for record in records]
        issues.extend(check_duplicates(identifiers, self._schema.identifier))

        report = ValidationReport.from_issues(issues, total_rows=len(records))
        log_event(
            logger,
            logging.DEBUG,
            "records_validated",
            kind=self._schema.kind,
            rows=report.summary.total_rows,
            errors=report.summary.error_count,
            warnings=report.summary.warning_count,
        )
        return report

    def _validate_row(
        self,
        record: Record,
        row: int,
        reference_sets: Mapping[str, tuple[str, ...]],
    ) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        for spec in self._schema.fields:
            if spec.required:
                missing = check_required(record.get(spec.name), spec.name, row)
                if missing is not None:
                    issues.append(missing)

            value = read_field(record, spec)

            type_issue = check_type(value, spec, row)
            if type_issue is not None:
                issues.append(type_issue)

            range_issue = check_range(value, spec, row)
            if range_issue is not None:
                issues.append(range_issue)

            allowed = reference_sets.get(spec.name)
            if allowed is not None:
                issues.extend(check_reference(value, spec, row, allowed))
        return issues


_VALIDATORS: Mapping[EntityKind, RecordValidator] = MappingProxyType(
    {
        EntityKind.CLIENTS: RecordValidator(CLIENT_SCHEMA),
        EntityKind.WORKERS: RecordValidator(WORKER_SCHEMA),
        EntityKind.TASKS: RecordValidator(TASK_SCHEMA),
    }
)


def validate_records(
    records: Sequence[Record],
    kind: EntityKind | str,
    *,
    references: Mapping[str, Sequence[str]] | None = None,
) -> ValidationReport:
    """
    Validate records of any entity kind.
    """

    schema = schema_for(kind)
    return _VALIDATORS[schema.kind].validate(records, references=references)


def validate_clients(
    records: Sequence[Record],
    *,
    known_task_ids: Sequence[str] | None = None,
) -> ValidationReport:
    """
    Validate client records; requested task ids are checked when known.
    """

    references = {"RequestedTaskIDs": known_task_ids} if known_task_ids is not None else None
    return _VALIDATORS[EntityKind.CLIENTS].validate(records, references=references)


def validate_workers(records: Sequence[Record]) -> ValidationReport:
    return _VALIDATORS[EntityKind.WORKERS].validate(records)


def validate_tasks(
    records: Sequence[Record],
    *,
    known_skills: Sequence[str] | None = None,
) -> ValidationReport:
    """
    Validate task records; required skills are checked when known.
    """

    references = {"RequiredSkills": known_skills} if known_skills is not None else None
    return _VALIDATORS[EntityKind.TASKS].validate(records, references=references)


def validate_dataset(
    clients: Sequence[Record],
    workers: Sequence[Record],
    tasks: Sequence[Record],
) -> DatasetValidation:
    """
    Validate a full upload, cross-checking references between entities.

    Requested task ids must name uploaded tasks and required skills must be
    offered by at least one worker. A reference check is skipped while the
    entity it points at has no values yet.
    """

    task_ids = collect_reference_set(record.get("TaskID") for record in tasks)
    skills = collect_reference_set(
        skill
        for record in workers
        for skill in split_list(record.get("Skills"))
    )

    return DatasetValidation(
        clients=validate_clients(clients, known_task_ids=task_ids or None),
        workers=validate_workers(workers),
        tasks=validate_tasks(tasks, known_skills=skills or None),
        reference_sets={"TaskID": task_ids, "Skills": skills},
    )
