"""
app/validators package marker.
"""

from app.validators.checks import (
    check_duplicates,
    check_range,
    check_reference,
    check_required,
    check_type,
)
from app.validators.recommendations import quick_fixes, recommendations
from app.validators.record_validator import (
    RecordValidator,
    validate_clients,
    validate_dataset,
    validate_records,
    validate_tasks,
    validate_workers,
)

__all__ = [
    "RecordValidator",
    "check_duplicates",
    "check_range",
    "check_reference",
    "check_required",
    "check_type",
    "quick_fixes",
    "recommendations",
    "validate_clients",
    "validate_dataset",
    "validate_records",
    "validate_tasks",
    "validate_workers",
]
