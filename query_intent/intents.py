"""
query_intent/intents.py

Recognized query intents. Each intent is an immutable value that knows how
to test one record.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Union

from app.domain.records import Record, cell_text, parse_number, split_list

_COMPARATORS: Mapping[str, Callable[[float, float], bool]] = MappingProxyType(
    {
        ">=": operator.ge,
        ">": operator.gt,
        "<=": operator.le,
    }
)


def _lowered(record: Record, field: str) -> str:
    text = cell_text(record.get(field))
    return text.lower() if text else ""


@dataclass(frozen=True)
class NumericThreshold:
    """
    Keep records whose numeric ``field`` compares true against ``value``.

    Records with a missing or unparsable number never match.
    """

    field: str
    operator: str
    value: float

    def __post_init__(self) -> None:
        if self.operator not in _COMPARATORS:
            raise ValueError(f"Unsupported comparison operator '{self.operator}'.")

    def matches(self, record: Record) -> bool:
        number = parse_number(record.get(self.field))
        if number is None:
            return False
        return _COMPARATORS[self.operator](number, self.value)


@dataclass(frozen=True)
class TextContains:
    field: str
    text: str

    def matches(self, record: Record) -> bool:
        stored = _lowered(record, self.field)
        return bool(stored) and self.text.lower() in stored


@dataclass(frozen=True)
class AnyCandidateContained:
    """
    Keep records whose raw ``field`` text contains any candidate substring.
    """

    field: str
    candidates: tuple[str, ...]

    def matches(self, record: Record) -> bool:
        stored = _lowered(record, self.field)
        if not stored:
            return False
        return any(candidate.lower() in stored for candidate in self.candidates)


@dataclass(frozen=True)
class SlotAvailability:
    """
    Keep workers with any available slot, or with ``phase`` among their slots.
    """

    phase: int | None = None
    field: str = "AvailableSlots"

    def matches(self, record: Record) -> bool:
        slots = split_list(record.get(self.field))
        if not slots:
            return False
        if self.phase is None:
            return True
        return any(parse_number(slot) == self.phase for slot in slots)


@dataclass(frozen=True)
class GenericSearch:
    """
    Keep records where any non-empty value contains ``text``, case-insensitively.
    """

    text: str

    def matches(self, record: Record) -> bool:
        needle = self.text.lower()
        for value in record.values():
            stored = cell_text(value)
            if stored and needle in stored.lower():
                return True
        return False


QueryIntent = Union[
    NumericThreshold,
    TextContains,
    AnyCandidateContained,
    SlotAvailability,
    GenericSearch,
]


def apply_intent(intent: QueryIntent, records: Iterable[Record]) -> list[Record]:
    """
    Filter records with an interpreted intent, preserving input order.
    """

    return [record for record in records if intent.matches(record)]
