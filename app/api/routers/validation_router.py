"""
app/api/routers/validation_router.py

Record validation endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from app.api.dependencies import resolve_entity_or_400
from app.domain.schema import EntityKind
from app.schemas.validation import (
    DatasetValidationRequest,
    DatasetValidationResponse,
    ValidationReportResponse,
    ValidationRequest,
)
from app.validators.recommendations import recommendations
from app.validators.record_validator import validate_dataset, validate_records

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/validate", tags=["validation"])


@router.post(
    "",
    response_model=ValidationReportResponse,
    status_code=status.HTTP_200_OK,
)
def validate_entity(body: ValidationRequest) -> ValidationReportResponse:
    """
    Validate one entity's records without cross-entity references.

    Raises HTTP 400 for an unknown ``entity``.
    """
    kind = resolve_entity_or_400(body.entity)
    report = validate_records(body.records, kind)
    return ValidationReportResponse.from_report(
        kind.value,
        report,
        recommendations(report, kind),
    )


@router.post(
    "/dataset",
    response_model=DatasetValidationResponse,
    status_code=status.HTTP_200_OK,
)
def validate_full_dataset(body: DatasetValidationRequest) -> DatasetValidationResponse:
    """
    Validate clients, workers and tasks together, checking references between them.
    """
    result = validate_dataset(body.clients, body.workers, body.tasks)
    reports = {
        EntityKind.CLIENTS: result.clients,
        EntityKind.WORKERS: result.workers,
        EntityKind.TASKS: result.tasks,
    }
    responses = {
        kind: ValidationReportResponse.from_report(kind.value, report, recommendations(report, kind))
        for kind, report in reports.items()
    }
    logger.info(
        "Dataset validated: valid=%s clients=%d workers=%d tasks=%d",
        result.is_valid,
        len(body.clients),
        len(body.workers),
        len(body.tasks),
    )
    return DatasetValidationResponse(
        is_valid=result.is_valid,
        clients=responses[EntityKind.CLIENTS],
        workers=responses[EntityKind.WORKERS],
        tasks=responses[EntityKind.TASKS],
        reference_sets={name: list(values) for name, values in result.reference_sets.items()},
    )
