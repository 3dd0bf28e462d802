"""
tests/test_query_parser.py

Pytest unit tests for the query intent parser and record filtering.

Coverage
--------
- Client, worker and task pattern tables
- First-pattern-wins ordering
- Keyword hits without an extractable parameter fall through
- Generic substring fallback equivalence
- Matched intents that select nothing do not fall back
"""

from __future__ import annotations

import pytest

from app.domain.schema import UnknownEntityKindError
from query_intent.intents import (
    AnyCandidateContained,
    GenericSearch,
    NumericThreshold,
    SlotAvailability,
    TextContains,
    apply_intent,
)
from query_intent.parser import describe_patterns, filter_records, interpret


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def clients() -> list[dict]:
    return [
        {"ClientID": "C1", "ClientName": "Acme Corp", "PriorityLevel": "5", "RequestedTaskIDs": "T1,T2", "GroupTag": "GroupA"},
        {"ClientID": "C2", "ClientName": "Beta Ltd", "PriorityLevel": "2", "RequestedTaskIDs": "T3", "GroupTag": "GroupB"},
        {"ClientID": "C3", "ClientName": "Gamma Inc", "PriorityLevel": "4", "RequestedTaskIDs": "T2,T4", "GroupTag": "GroupA"},
        {"ClientID": "C4", "ClientName": "Priority 9 Partners", "PriorityLevel": "1", "RequestedTaskIDs": "", "GroupTag": ""},
    ]


@pytest.fixture()
def workers() -> list[dict]:
    return [
        {"WorkerID": "W1", "Skills": "Python, SQL", "AvailableSlots": "[1,3,5]", "MaxLoadPerPhase": "2", "WorkerGroup": "GroupA"},
        {"WorkerID": "W2", "Skills": "Java", "AvailableSlots": "2,4", "MaxLoadPerPhase": "4", "WorkerGroup": "GroupB"},
        {"WorkerID": "W3", "Skills": "python", "AvailableSlots": "", "MaxLoadPerPhase": "1", "WorkerGroup": "GroupA"},
    ]


@pytest.fixture()
def tasks() -> list[dict]:
    return [
        {"TaskID": "T1", "Duration": "2", "PreferredPhases": "1-3", "RequiredSkills": "Python", "MaxConcurrent": "3"},
        {"TaskID": "T2", "Duration": "5", "PreferredPhases": "[2,4]", "RequiredSkills": "Java, SQL", "MaxConcurrent": "1"},
        {"TaskID": "T3", "Duration": "4", "PreferredPhases": "5", "RequiredSkills": "python", "MaxConcurrent": "2"},
    ]


def _ids(records: list[dict], key: str) -> list[str]:
    return [record[key] for record in records]


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------


class TestClientQueries:
    def test_high_priority_defaults_to_four(self, clients: list[dict]) -> None:
        intent = interpret("High priority clients", "clients")

        assert intent == NumericThreshold(field="PriorityLevel", operator=">=", value=4)
        assert _ids(apply_intent(intent, clients), "ClientID") == ["C1", "C3"]

    def test_explicit_priority_level(self, clients: list[dict]) -> None:
        assert _ids(filter_records("priority level 5", clients, "clients"), "ClientID") == ["C1"]

    def test_name_contains(self, clients: list[dict]) -> None:
        intent = interpret("client name is acme", "clients")

        assert intent == TextContains(field="ClientName", text="acme")
        assert _ids(apply_intent(intent, clients), "ClientID") == ["C1"]

    def test_requested_tasks_any_candidate(self, clients: list[dict]) -> None:
        intent = interpret("requested tasks t1 or t3", "clients")

        assert intent == AnyCandidateContained(field="RequestedTaskIDs", candidates=("t1", "t3"))
        assert _ids(apply_intent(intent, clients), "ClientID") == ["C1", "C2"]

    def test_group_tag(self, clients: list[dict]) -> None:
        assert _ids(filter_records("group groupb", clients, "clients"), "ClientID") == ["C2"]

    def test_first_matching_pattern_wins(self) -> None:
        intent = interpret("high priority name beta", "clients")

        assert isinstance(intent, NumericThreshold)
        assert intent.value == 4

    def test_keyword_without_parameter_falls_through(self) -> None:
        assert interpret("tasks", "clients") == GenericSearch(text="tasks")

    def test_matched_intent_with_no_hits_does_not_fall_back(self, clients: list[dict]) -> None:
        # Generic search for "priority 9" would return C4.
        assert filter_records("priority 9", clients, "clients") == []

    def test_oversized_numbers_never_match_thresholds(self) -> None:
        records = [{"ClientID": "C1", "PriorityLevel": 10**400}, {"ClientID": "C2", "PriorityLevel": "5"}]

        assert filter_records("high priority", records, "clients") == [records[1]]


# ---------------------------------------------------------------------------
# Workers
# ---------------------------------------------------------------------------


class TestWorkerQueries:
    def test_skills_single_candidate(self, workers: list[dict]) -> None:
        assert _ids(filter_records("workers with skills python", workers, "workers"), "WorkerID") == ["W1", "W3"]

    def test_skills_multiple_candidates(self, workers: list[dict]) -> None:
        intent = interpret("skills: java and sql", "workers")

        assert intent == AnyCandidateContained(field="Skills", candidates=("java", "sql"))
        assert _ids(apply_intent(intent, workers), "WorkerID") == ["W1", "W2"]

    def test_available_in_phase(self, workers: list[dict]) -> None:
        intent = interpret("available in phase 3", "workers")

        assert intent == SlotAvailability(phase=3)
        assert _ids(apply_intent(intent, workers), "WorkerID") == ["W1"]

    def test_available_without_phase_requires_any_slot(self, workers: list[dict]) -> None:
        assert _ids(filter_records("available workers", workers, "workers"), "WorkerID") == ["W1", "W2"]

    def test_max_load_at_most(self, workers: list[dict]) -> None:
        assert _ids(filter_records("max load 2", workers, "workers"), "WorkerID") == ["W1", "W3"]

    def test_worker_group(self, workers: list[dict]) -> None:
        assert _ids(filter_records("worker group groupb", workers, "workers"), "WorkerID") == ["W2"]


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


class TestTaskQueries:
    def test_duration_more_than(self, tasks: list[dict]) -> None:
        intent = interpret("duration more than 3", "tasks")

        assert intent == NumericThreshold(field="Duration", operator=">", value=3)
        assert _ids(apply_intent(intent, tasks), "TaskID") == ["T2", "T3"]

    def test_phase_matching_is_raw_substring(self, tasks: list[dict]) -> None:
        assert _ids(filter_records("phase 2", tasks, "tasks"), "TaskID") == ["T2"]
        assert _ids(filter_records("phases 1-3", tasks, "tasks"), "TaskID") == ["T1"]

    def test_required_skills(self, tasks: list[dict]) -> None:
        assert _ids(filter_records("required skills sql", tasks, "tasks"), "TaskID") == ["T2"]

    def test_max_concurrent_at_most(self, tasks: list[dict]) -> None:
        assert _ids(filter_records("max concurrent 2", tasks, "tasks"), "TaskID") == ["T2", "T3"]


# ---------------------------------------------------------------------------
# Fallback and table contract
# ---------------------------------------------------------------------------


class TestFallback:
    def test_unrecognized_query_equals_substring_scan(self, clients: list[dict]) -> None:
        for query in ("xyz123", "  ACME ", "ltd"):
            needle = query.strip().lower()
            expected = [
                record
                for record in clients
                if any(needle in str(value).lower() for value in record.values() if value)
            ]
            assert filter_records(query, clients, "clients") == expected

    def test_fallback_is_case_insensitive(self, clients: list[dict]) -> None:
        assert _ids(filter_records("BETA", clients, "clients"), "ClientID") == ["C2"]

    def test_empty_records(self) -> None:
        assert filter_records("anything", [], "workers") == []

    def test_pattern_order_is_exposed(self) -> None:
        assert describe_patterns("clients") == (
            "priority_at_least",
            "name_contains",
            "requested_tasks_include",
            "group_tag_contains",
        )
        assert describe_patterns("workers")[0] == "skills_include"
        assert describe_patterns("tasks")[0] == "duration_greater_than"

    def test_unknown_entity_kind_raises(self) -> None:
        with pytest.raises(UnknownEntityKindError):
            interpret("anything", "vendors")

    def test_numeric_threshold_rejects_unknown_operator(self) -> None:
        with pytest.raises(ValueError):
            NumericThreshold(field="Duration", operator="==", value=1)
