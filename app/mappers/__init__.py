"""
app/mappers package marker.
"""

from app.mappers.column_mapper import (
    CANONICAL_FIELD_NAMES,
    DEFAULT_COLUMN_ALIASES,
    ColumnMapper,
    ColumnMapping,
    map_columns,
)
from app.mappers.similarity import levenshtein, normalize_token, similarity

__all__ = [
    "CANONICAL_FIELD_NAMES",
    "DEFAULT_COLUMN_ALIASES",
    "ColumnMapper",
    "ColumnMapping",
    "levenshtein",
    "map_columns",
    "normalize_token",
    "similarity",
]
