"""
query_intent/parser.py

Deterministic query interpretation for record filtering. No LLM.

Each entity kind has an ordered pattern table. A pattern wins when one of
its keywords occurs in the lowercased query and its extractor pulls a
parameter out of it. Patterns are tried top to bottom and the first winner
decides the intent; when none wins the query becomes a generic substring
search over every field. A winning intent that selects no records is an
empty result, never a fallback.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from app.domain.records import Record
from app.domain.schema import EntityKind, resolve_entity_kind
from query_intent.intents import (
    AnyCandidateContained,
    GenericSearch,
    NumericThreshold,
    QueryIntent,
    SlotAvailability,
    TextContains,
    apply_intent,
)

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY_THRESHOLD = 4

Extractor = Callable[[str], "QueryIntent | None"]


@dataclass(frozen=True)
class IntentPattern:
    """
    One (predicate, extractor) pair of a pattern table.
    """

    name: str
    keywords: tuple[str, ...]
    extract: Extractor

    def match(self, query: str) -> QueryIntent | None:
        if not any(keyword in query for keyword in self.keywords):
            return None
        return self.extract(query)


# ---------------------------------------------------------------------------
# Regexes (applied to the lowercased query)
# ---------------------------------------------------------------------------

_PRIORITY_RE = re.compile(r"priority\s*(?:level)?\s*(\d+)")
_NAME_RE = re.compile(r"named?\b\s*(?:is\b|[:=])?\s*['\"]?([^'\"]+)['\"]?")
_REQUESTED_TASKS_RE = re.compile(r"(?:requested\s*)?tasks\s*([a-z0-9, ]+)")
_GROUP_RE = re.compile(r"group\s*([a-z0-9]+)")
_SKILLS_RE = re.compile(r"skills?\b\s*[:\-]?\s*([a-z, ]+)")
_PHASE_RE = re.compile(r"phase\s*(\d+)")
_MAX_LOAD_RE = re.compile(r"(?:max load|load limit)\s*(?:of)?\s*(\d+)")
_WORKER_GROUP_RE = re.compile(r"worker group\s*([a-z0-9]+)")
_DURATION_RE = re.compile(r"duration\s*(?:more than|>)\s*(\d+)")
_PHASES_RE = re.compile(r"phases?\s*(\d+(?:-\d+)?(?:,\s*\d+(?:-\d+)?)*)")
_REQUIRED_SKILLS_RE = re.compile(r"(?:required skills?\b|skills needed)\s*[:\-]?\s*([a-z, ]+)")
_MAX_CONCURRENT_RE = re.compile(r"(?:max concurrent|parallel)\s*(?:of)?\s*(\d+)")

_CANDIDATE_SPLIT_RE = re.compile(r",|\s+(?:and|or)\s+")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _candidates(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in _CANDIDATE_SPLIT_RE.split(raw) if part.strip())


def _candidate_intent(pattern: re.Pattern[str], field: str) -> Extractor:
    def extract(query: str) -> QueryIntent | None:
        match = pattern.search(query)
        if not match:
            return None
        candidates = _candidates(match.group(1))
        return AnyCandidateContained(field=field, candidates=candidates) if candidates else None

    return extract


def _threshold_intent(pattern: re.Pattern[str], field: str, comparison: str) -> Extractor:
    def extract(query: str) -> QueryIntent | None:
        match = pattern.search(query)
        if not match:
            return None
        return NumericThreshold(field=field, operator=comparison, value=int(match.group(1)))

    return extract


def _contains_intent(pattern: re.Pattern[str], field: str) -> Extractor:
    def extract(query: str) -> QueryIntent | None:
        match = pattern.search(query)
        if not match:
            return None
        text = match.group(1).strip()
        return TextContains(field=field, text=text) if text else None

    return extract


def _extract_priority(query: str) -> QueryIntent:
    match = _PRIORITY_RE.search(query)
    threshold = int(match.group(1)) if match else DEFAULT_PRIORITY_THRESHOLD
    return NumericThreshold(field="PriorityLevel", operator=">=", value=threshold)


def _extract_availability(query: str) -> QueryIntent:
    match = _PHASE_RE.search(query)
    return SlotAvailability(phase=int(match.group(1)) if match else None)


# ---------------------------------------------------------------------------
# Pattern tables (order is part of the contract)
# ---------------------------------------------------------------------------

CLIENT_PATTERNS: tuple[IntentPattern, ...] = (
    IntentPattern("priority_at_least", ("high priority", "priority"), _extract_priority),
    IntentPattern("name_contains", ("client name", "name"), _contains_intent(_NAME_RE, "ClientName")),
    IntentPattern(
        "requested_tasks_include",
        ("requested tasks", "tasks"),
        _candidate_intent(_REQUESTED_TASKS_RE, "RequestedTaskIDs"),
    ),
    IntentPattern("group_tag_contains", ("group",), _contains_intent(_GROUP_RE, "GroupTag")),
)

WORKER_PATTERNS: tuple[IntentPattern, ...] = (
    IntentPattern("skills_include", ("skill",), _candidate_intent(_SKILLS_RE, "Skills")),
    IntentPattern("slot_availability", ("available", "slots"), _extract_availability),
    IntentPattern(
        "max_load_at_most",
        ("max load", "load limit"),
        _threshold_intent(_MAX_LOAD_RE, "MaxLoadPerPhase", "<="),
    ),
    IntentPattern(
        "worker_group_contains",
        ("worker group",),
        _contains_intent(_WORKER_GROUP_RE, "WorkerGroup"),
    ),
)

TASK_PATTERNS: tuple[IntentPattern, ...] = (
    IntentPattern(
        "duration_greater_than",
        ("duration more than", "duration >"),
        _threshold_intent(_DURATION_RE, "Duration", ">"),
    ),
    IntentPattern("phases_include", ("phase",), _candidate_intent(_PHASES_RE, "PreferredPhases")),
    IntentPattern(
        "required_skills_include",
        ("required skill", "skills needed"),
        _candidate_intent(_REQUIRED_SKILLS_RE, "RequiredSkills"),
    ),
    IntentPattern(
        "max_concurrent_at_most",
        ("max concurrent", "parallel"),
        _threshold_intent(_MAX_CONCURRENT_RE, "MaxConcurrent", "<="),
    ),
)

PATTERN_TABLES: Mapping[EntityKind, tuple[IntentPattern, ...]] = MappingProxyType(
    {
        EntityKind.CLIENTS: CLIENT_PATTERNS,
        EntityKind.WORKERS: WORKER_PATTERNS,
        EntityKind.TASKS: TASK_PATTERNS,
    }
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def describe_patterns(kind: EntityKind | str) -> tuple[str, ...]:
    """Return the pattern names for an entity kind, in evaluation order."""
    return tuple(pattern.name for pattern in PATTERN_TABLES[resolve_entity_kind(kind)])


def interpret(query: str, kind: EntityKind | str) -> QueryIntent:
    """
    Turn a free-text query into an intent for one entity kind.

    Never fails: an unrecognized query becomes a :class:`GenericSearch`.
    """

    entity_kind = resolve_entity_kind(kind)
    normalized = query.strip().lower()
    for pattern in PATTERN_TABLES[entity_kind]:
        intent = pattern.match(normalized)
        if intent is not None:
            logger.debug("Query %r matched pattern %s for %s", normalized, pattern.name, entity_kind.value)
            return intent

    logger.debug("Query %r fell back to generic search for %s", normalized, entity_kind.value)
    return GenericSearch(text=normalized)


def filter_records(
    query: str,
    records: Sequence[Record],
    kind: EntityKind | str,
) -> list[Record]:
    """
    Interpret ``query`` and apply it to ``records`` in one step.
    """

    return apply_intent(interpret(query, kind), records)
