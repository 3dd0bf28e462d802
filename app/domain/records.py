"""
app/domain/records.py

Typed access to loosely-typed tabular records.

Records arrive from the upstream loader as plain mappings of field name to
string (or nothing). ``read_field`` turns one raw cell into a ``FieldValue``
according to the field's schema type, so callers get either a usable value
or an explicit absent/malformed outcome instead of guessing.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from app.domain.schema import FieldSpec, FieldType

Record = Mapping[str, Any]

_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_QUOTE_CHARS = "\"'"


class ValueKind(str, Enum):
    ABSENT = "absent"
    TEXT = "text"
    NUMBER = "number"
    LIST = "list"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class FieldValue:
    """
    Result of reading one record cell through its schema type.
    """

    kind: ValueKind
    raw: str | None = None
    number: float | None = None
    items: tuple[str, ...] = ()
    numbers: tuple[float, ...] = ()

    @property
    def is_absent(self) -> bool:
        return self.kind is ValueKind.ABSENT

    @property
    def is_malformed(self) -> bool:
        return self.kind is ValueKind.MALFORMED


def cell_text(value: Any) -> str | None:
    """
    Stringify a raw cell, returning None for missing values.
    """

    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def is_blank(value: Any) -> bool:
    text = cell_text(value)
    return text is None or text.strip() == ""


def parse_number(value: Any) -> float | None:
    """
    Parse a finite decimal number from a cell, or return None.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    text = cell_text(value)
    if text is None:
        return None
    stripped = text.strip()
    if not _NUMBER_PATTERN.match(stripped):
        return None
    number = float(stripped)
    return number if math.isfinite(number) else None


def split_list(value: Any) -> tuple[str, ...]:
    """
    Split a delimited cell such as ``"a, b"`` or ``"[1,3,5]"`` into items.
    """

    text = cell_text(value)
    if text is None:
        return ()
    stripped = text.strip()
    if stripped.startswith("[") and stripped.endswith("]"):
        stripped = stripped[1:-1]
    items: list[str] = []
    for part in stripped.split(","):
        item = part.strip().strip(_QUOTE_CHARS).strip()
        if item:
            items.append(item)
    return tuple(items)


def read_field(record: Record, spec: FieldSpec) -> FieldValue:
    """
    Read one field from a record according to its schema type.
    """

    raw = cell_text(record.get(spec.name))
    if raw is None or raw.strip() == "":
        return FieldValue(kind=ValueKind.ABSENT, raw=raw)

    if spec.field_type in (FieldType.INTEGER, FieldType.BOUNDED_INTEGER):
        number = parse_number(raw)
        if number is None:
            return FieldValue(kind=ValueKind.MALFORMED, raw=raw)
        return FieldValue(kind=ValueKind.NUMBER, raw=raw, number=number)

    if spec.field_type is FieldType.INTEGER_LIST:
        items = split_list(raw)
        numbers = [parse_number(item) for item in items]
        if not items or any(number is None for number in numbers):
            return FieldValue(kind=ValueKind.MALFORMED, raw=raw, items=items)
        return FieldValue(
            kind=ValueKind.LIST,
            raw=raw,
            items=items,
            numbers=tuple(number for number in numbers if number is not None),
        )

    if spec.field_type is FieldType.DELIMITED_LIST:
        return FieldValue(kind=ValueKind.LIST, raw=raw, items=split_list(raw))

    return FieldValue(kind=ValueKind.TEXT, raw=raw)
