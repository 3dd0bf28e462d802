"""
app/api/routers/columns_router.py

Column header reconciliation endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_column_mapper
from app.mappers.column_mapper import ColumnMapper
from app.schemas.columns import ColumnMappingResponse, ColumnMapRequest, ColumnMapResponse

router = APIRouter(prefix="/columns", tags=["columns"])


@router.post(
    "/map",
    response_model=ColumnMapResponse,
    status_code=status.HTTP_200_OK,
)
def map_columns(
    body: ColumnMapRequest,
    mapper: ColumnMapper = Depends(get_column_mapper),
) -> ColumnMapResponse:
    """
    Suggest canonical fields for uploaded headers.

    Headers without a confident match are listed under ``unmapped``.
    """
    mappings = mapper.map_columns(body.headers)
    mapped = {mapping.original for mapping in mappings}
    return ColumnMapResponse(
        mappings=[
            ColumnMappingResponse(
                original=mapping.original,
                suggested=mapping.suggested,
                field_name=ColumnMapper.canonical_field_name(mapping.suggested),
                confidence=mapping.confidence,
            )
            for mapping in mappings
        ],
        unmapped=[header for header in body.headers if header not in mapped],
    )
