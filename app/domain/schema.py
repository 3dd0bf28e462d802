"""
app/domain/schema.py

Canonical entity schemas for clients, workers, and tasks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class EntityKind(str, Enum):
    """
    The three record families handled by the workbench.
    """

    CLIENTS = "clients"
    WORKERS = "workers"
    TASKS = "tasks"


class FieldType(str, Enum):
    """
    Semantic type of one canonical field.
    """

    STRING = "string"
    INTEGER = "integer"
    BOUNDED_INTEGER = "bounded_integer"
    DELIMITED_LIST = "delimited_list"
    INTEGER_LIST = "integer_list"
    FREE_TEXT = "free_text"


NUMERIC_FIELD_TYPES = frozenset(
    {
        FieldType.INTEGER,
        FieldType.BOUNDED_INTEGER,
        FieldType.INTEGER_LIST,
    }
)


class UnknownEntityKindError(ValueError):
    """
    Raised when an entity kind string does not name a known schema.
    """

    def __init__(self, value: object) -> None:
        allowed = ", ".join(kind.value for kind in EntityKind)
        super().__init__(f"Unknown entity kind '{value}'. Allowed values: {allowed}.")
        self.value = value
        self.allowed = tuple(kind.value for kind in EntityKind)


@dataclass(frozen=True)
class FieldSpec:
    """
    One canonical field of an entity schema.
    """

    name: str
    field_type: FieldType
    required: bool = False
    bounds: tuple[float, float] | None = None

    @property
    def is_numeric(self) -> bool:
        return self.field_type in NUMERIC_FIELD_TYPES


@dataclass(frozen=True)
class EntitySchema:
    """
    Ordered field list plus identifier field for one entity kind.
    """

    kind: EntityKind
    identifier: str
    fields: tuple[FieldSpec, ...]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    @property
    def required_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.required)

    @property
    def numeric_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.is_numeric)

    @property
    def bounded_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.bounds is not None)

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.kind.value} schema has no field '{name}'.")


CLIENT_SCHEMA = EntitySchema(
    kind=EntityKind.CLIENTS,
    identifier="ClientID",
    fields=(
        FieldSpec("ClientID", FieldType.STRING, required=True),
        FieldSpec("ClientName", FieldType.STRING, required=True),
        FieldSpec("PriorityLevel", FieldType.BOUNDED_INTEGER, required=True, bounds=(1, 10)),
        FieldSpec("RequestedTaskIDs", FieldType.DELIMITED_LIST),
        FieldSpec("GroupTag", FieldType.STRING),
        FieldSpec("AttributesJSON", FieldType.FREE_TEXT),
    ),
)

WORKER_SCHEMA = EntitySchema(
    kind=EntityKind.WORKERS,
    identifier="WorkerID",
    fields=(
        FieldSpec("WorkerID", FieldType.STRING, required=True),
        FieldSpec("WorkerName", FieldType.STRING, required=True),
        FieldSpec("Skills", FieldType.DELIMITED_LIST, required=True),
        FieldSpec("AvailableSlots", FieldType.INTEGER_LIST),
        FieldSpec("MaxLoadPerPhase", FieldType.INTEGER),
        FieldSpec("WorkerGroup", FieldType.STRING),
        FieldSpec("QualificationLevel", FieldType.BOUNDED_INTEGER, bounds=(1, 10)),
    ),
)

TASK_SCHEMA = EntitySchema(
    kind=EntityKind.TASKS,
    identifier="TaskID",
    fields=(
        FieldSpec("TaskID", FieldType.STRING, required=True),
        FieldSpec("TaskName", FieldType.STRING, required=True),
        FieldSpec("Category", FieldType.STRING, required=True),
        FieldSpec("Duration", FieldType.INTEGER),
        FieldSpec("RequiredSkills", FieldType.DELIMITED_LIST),
        FieldSpec("PreferredPhases", FieldType.FREE_TEXT),
        FieldSpec("MaxConcurrent", FieldType.INTEGER),
    ),
)

SCHEMAS: Mapping[EntityKind, EntitySchema] = MappingProxyType(
    {
        EntityKind.CLIENTS: CLIENT_SCHEMA,
        EntityKind.WORKERS: WORKER_SCHEMA,
        EntityKind.TASKS: TASK_SCHEMA,
    }
)

# Singular forms are accepted for callers posting "client".
_KIND_NAMES: Mapping[str, EntityKind] = MappingProxyType(
    {
        **{kind.value: kind for kind in EntityKind},
        "client": EntityKind.CLIENTS,
        "worker": EntityKind.WORKERS,
        "task": EntityKind.TASKS,
    }
)


def resolve_entity_kind(value: EntityKind | str) -> EntityKind:
    """
    Resolve an entity kind from an enum member or a (possibly singular) name.
    """

    if isinstance(value, EntityKind):
        return value
    normalized = str(value).strip().lower()
    if normalized not in _KIND_NAMES:
        raise UnknownEntityKindError(value)
    return _KIND_NAMES[normalized]


def schema_for(kind: EntityKind | str) -> EntitySchema:
    """
    Return the canonical schema for an entity kind.
    """

    return SCHEMAS[resolve_entity_kind(kind)]
