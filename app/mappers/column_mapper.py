"""
app/mappers/column_mapper.py

Fuzzy reconciliation of user column headers against canonical fields.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from app.config import MappingSettings, get_mapping_settings
from app.mappers.similarity import normalize_token, similarity

logger = logging.getLogger(__name__)

# Table order is the tie-break order: the first canonical field reaching the
# best score keeps it.
DEFAULT_COLUMN_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "CLIENT_ID": ("CLIENT_ID", "client_id", "ClientID", "id", "client_identifier"),
        "CLIENT_NAME": ("CLIENT_NAME", "client_name", "ClientName", "name", "company_name"),
        "PRIORITY_LEVEL": ("PRIORITY_LEVEL", "priority_level", "Priority", "PriorityLevel", "importance"),
        "REQUESTED_TASK_IDS": (
            "REQUESTED_TASK_IDS",
            "requested_task_ids",
            "RequestedTasks",
            "RequestedTaskIDs",
            "task_ids",
            "tasks",
        ),
        "GROUP_TAG": ("GROUP_TAG", "group_tag", "Group", "GroupTag", "team_tag"),
        "WORKER_ID": ("WORKER_ID", "worker_id", "WorkerID", "employee_id", "id"),
        "WORKER_NAME": ("WORKER_NAME", "worker_name", "WorkerName", "name", "employee_name"),
        "SKILLS": ("SKILLS", "skills", "Skills", "capabilities", "expertise"),
        "AVAILABLE_SLOTS": ("AVAILABLE_SLOTS", "available_slots", "AvailableSlots", "availability", "slots"),
        "MAX_LOAD_PER_PHASE": (
            "MAX_LOAD_PER_PHASE",
            "max_load_per_phase",
            "MaxLoad",
            "MaxLoadPerPhase",
            "maximum_load",
            "capacity",
        ),
        "WORKER_GROUP": ("WORKER_GROUP", "worker_group", "Group", "WorkerGroup", "team", "department"),
        "QUALIFICATION_LEVEL": (
            "QUALIFICATION_LEVEL",
            "qualification_level",
            "Qualification",
            "QualificationLevel",
            "qualifications",
            "certifications",
        ),
        "TASK_ID": ("TASK_ID", "task_id", "TaskID", "id", "task_identifier"),
        "TASK_NAME": ("TASK_NAME", "task_name", "TaskName", "name", "title"),
        "CATEGORY": ("CATEGORY", "category", "Category", "type", "task_type"),
        "DURATION": ("DURATION", "duration", "Duration", "time", "estimated_hours"),
        "REQUIRED_SKILLS": ("REQUIRED_SKILLS", "required_skills", "RequiredSkills", "skills_needed"),
        "PREFERRED_PHASES": ("PREFERRED_PHASES", "preferred_phases", "PreferredPhases", "phases"),
        "MAX_CONCURRENT": ("MAX_CONCURRENT", "max_concurrent", "MaxConcurrent", "concurrent_limit"),
    }
)

# Canonical key -> record field name used by the entity schemas.
CANONICAL_FIELD_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "CLIENT_ID": "ClientID",
        "CLIENT_NAME": "ClientName",
        "PRIORITY_LEVEL": "PriorityLevel",
        "REQUESTED_TASK_IDS": "RequestedTaskIDs",
        "GROUP_TAG": "GroupTag",
        "WORKER_ID": "WorkerID",
        "WORKER_NAME": "WorkerName",
        "SKILLS": "Skills",
        "AVAILABLE_SLOTS": "AvailableSlots",
        "MAX_LOAD_PER_PHASE": "MaxLoadPerPhase",
        "WORKER_GROUP": "WorkerGroup",
        "QUALIFICATION_LEVEL": "QualificationLevel",
        "TASK_ID": "TaskID",
        "TASK_NAME": "TaskName",
        "CATEGORY": "Category",
        "DURATION": "Duration",
        "REQUIRED_SKILLS": "RequiredSkills",
        "PREFERRED_PHASES": "PreferredPhases",
        "MAX_CONCURRENT": "MaxConcurrent",
    }
)


@dataclass(frozen=True)
class ColumnMapping:
    """
    Suggested renaming of one raw header to a canonical field.
    """

    original: str
    suggested: str
    confidence: float


class ColumnMapper:
    """
    Maps incoming column headers to canonical schema fields.
    """

    def __init__(
        self,
        aliases: Mapping[str, Sequence[str]] | None = None,
        *,
        settings: MappingSettings | None = None,
    ) -> None:
        alias_map = aliases or DEFAULT_COLUMN_ALIASES
        resolved = settings or get_mapping_settings()
        self._threshold = resolved.confidence_threshold
        self._max_header_length = resolved.max_header_length
        self._normalized_aliases: tuple[tuple[str, tuple[str, ...]], ...] = tuple(
            (canonical, tuple(normalize_token(variant) for variant in variants))
            for canonical, variants in alias_map.items()
        )

    def map_columns(self, raw_headers: Sequence[str]) -> list[ColumnMapping]:
        """
        Suggest a canonical field for each header scoring above the threshold.

        Headers with no variant above the threshold are left out of the result.
        """

        mappings: list[ColumnMapping] = []
        for header in raw_headers:
            match = self.best_match(header)
            if match is None:
                logger.debug("No canonical field for header %r", header)
                continue
            mappings.append(match)
        return mappings

    def best_match(self, header: str) -> ColumnMapping | None:
        normalized = normalize_token(str(header)[: self._max_header_length])
        best_field = ""
        best_score = 0.0
        for canonical, variants in self._normalized_aliases:
            for variant in variants:
                score = similarity(normalized, variant)
                if score > best_score and score > self._threshold:
                    best_score = score
                    best_field = canonical
        if not best_field:
            return None
        return ColumnMapping(original=header, suggested=best_field, confidence=best_score)

    @staticmethod
    def canonical_field_name(suggested: str) -> str:
        """
        Convert a canonical key such as ``CLIENT_ID`` to its record field name.
        """

        return CANONICAL_FIELD_NAMES.get(suggested, suggested)

    def rename_record(
        self,
        record: Mapping[str, Any],
        mappings: Sequence[ColumnMapping],
    ) -> dict[str, Any]:
        """
        Re-key one raw record with accepted mappings, keeping unmapped keys.
        """

        renames = {
            mapping.original: self.canonical_field_name(mapping.suggested)
            for mapping in mappings
        }
        return {renames.get(key, key): value for key, value in record.items()}


def map_columns(raw_headers: Sequence[str]) -> list[ColumnMapping]:
    """
    Suggest canonical fields for raw headers using the default alias table.
    """

    return ColumnMapper().map_columns(raw_headers)
