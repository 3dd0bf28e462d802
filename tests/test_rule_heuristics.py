"""
tests/test_rule_heuristics.py

Pytest unit tests for rule suggestions, data-quality findings, rule
templates and priority weights. Pure inputs only.
"""

from __future__ import annotations

import pytest

from allocation_rules.data_quality import CRITICAL_FIELDS, NUMERIC_COLUMN_CHECKS, suggest_data_quality
from allocation_rules.priorities import (
    DEFAULT_CRITERIA,
    UnknownCriterionError,
    UnknownPresetError,
    apply_preset,
    is_balanced,
    set_weight,
    total_weight,
    weight_advice,
)
from allocation_rules.suggestions import (
    RuleSuggestion,
    mean_slot_count,
    suggest_rule_details,
    suggest_rules,
)
from allocation_rules.templates import natural_language_to_rule
from app.config import HeuristicSettings
from app.domain.schema import EntityKind, UnknownEntityKindError

PRIORITY_MESSAGE = (
    "Consider adding priority-based allocation rules for high-priority clients "
    "(e.g., Client Priority Level >= 4)."
)


@pytest.fixture()
def settings() -> HeuristicSettings:
    return HeuristicSettings()


def _clients(high: int, total: int = 10) -> list[dict]:
    return [
        {"ClientID": f"C{index}", "PriorityLevel": "5" if index < high else "2"}
        for index in range(total)
    ]


# ---------------------------------------------------------------------------
# Rule suggestions
# ---------------------------------------------------------------------------


class TestRuleSuggestions:
    def test_high_priority_share_above_threshold(self, settings: HeuristicSettings) -> None:
        assert suggest_rules(_clients(4), [], [], settings=settings) == [PRIORITY_MESSAGE]

    def test_high_priority_share_below_threshold(self, settings: HeuristicSettings) -> None:
        assert suggest_rules(_clients(2), [], [], settings=settings) == []

    def test_share_exactly_at_threshold_does_not_trigger(self, settings: HeuristicSettings) -> None:
        assert suggest_rules(_clients(3), [], [], settings=settings) == []

    def test_unparsable_priorities_count_towards_the_total(self, settings: HeuristicSettings) -> None:
        clients = _clients(4) + [{"ClientID": f"X{index}", "PriorityLevel": "high"} for index in range(4)]

        assert suggest_rules(clients, [], [], settings=settings) == []

    def test_all_rules_in_fixed_order(self, settings: HeuristicSettings) -> None:
        workers = [
            {"WorkerID": "W1", "AvailableSlots": "[1,2]", "WorkerGroup": "Sales"},
            {"WorkerID": "W2", "AvailableSlots": "3", "WorkerGroup": "Ops"},
        ]
        tasks = [
            {"TaskID": "T1", "Duration": "5", "MaxConcurrent": "2"},
            {"TaskID": "T2", "Duration": "1", "MaxConcurrent": "1"},
        ]

        details = suggest_rule_details(_clients(5), workers, tasks, settings=settings)

        assert [detail.statistic for detail in details] == [
            "high_priority_client_ratio",
            "mean_available_slots",
            "distinct_worker_groups",
            "long_duration_tasks",
            "concurrent_tasks",
        ]
        assert details[1].value == pytest.approx(1.5)
        assert details[3].value == 1

    def test_workers_without_slots_do_not_trigger_load_balancing(self, settings: HeuristicSettings) -> None:
        workers = [{"WorkerID": "W1", "AvailableSlots": ""}, {"WorkerID": "W2"}]

        assert suggest_rules([], workers, [], settings=settings) == []

    def test_single_worker_group_is_not_enough(self, settings: HeuristicSettings) -> None:
        workers = [{"WorkerGroup": "Sales"}, {"WorkerGroup": " Sales "}]

        assert suggest_rules([], workers, [], settings=settings) == []

    def test_empty_inputs_yield_nothing(self, settings: HeuristicSettings) -> None:
        assert suggest_rules([], [], [], settings=settings) == []

    def test_thresholds_come_from_settings(self) -> None:
        tasks = [{"TaskID": "T1", "Duration": "5"}]

        assert suggest_rules([], [], tasks, settings=HeuristicSettings(long_task_duration=6)) == []
        assert len(suggest_rules([], [], tasks, settings=HeuristicSettings(long_task_duration=4))) == 1

    def test_mean_slot_count_treats_bad_lists_as_empty(self) -> None:
        workers = [{"AvailableSlots": "1,2,3"}, {"AvailableSlots": "1,x"}]

        assert mean_slot_count(workers) == pytest.approx(1.5)

    def test_trigger_text(self) -> None:
        suggestion = RuleSuggestion(message="m", statistic="ratio", value=0.4, threshold=0.3)

        assert suggestion.trigger == "ratio = 0.4 (threshold 0.3)"


# ---------------------------------------------------------------------------
# Data quality
# ---------------------------------------------------------------------------


class TestDataQuality:
    def test_missing_values_then_non_numeric_columns(self) -> None:
        clients = [
            {"ClientID": "C1", "ClientName": "", "PriorityLevel": "high"},
            {"ClientID": "C2", "ClientName": "Beta", "PriorityLevel": "3"},
        ]

        findings = suggest_data_quality(clients, "clients")

        assert [(f.issue, f.auto_fix_available, f.confidence) for f in findings] == [
            ("1 rows missing ClientName", False, 0.9),
            ("PriorityLevel column contains non-numeric values", True, 0.8),
        ]
        assert findings[0].suggestion == "Add ClientName values or remove incomplete rows"

    def test_worker_slot_lists_and_load(self) -> None:
        workers = [
            {"WorkerID": "W1", "WorkerName": "Ann", "Skills": "Go", "AvailableSlots": "[1,3,5]", "MaxLoadPerPhase": "2"},
            {"WorkerID": "W2", "WorkerName": "Bob", "Skills": "Go", "AvailableSlots": "1, x", "MaxLoadPerPhase": "lots"},
        ]

        findings = suggest_data_quality(workers, "workers")

        assert [(f.issue, f.confidence) for f in findings] == [
            ("AvailableSlots column contains non-numeric values or invalid format", 0.8),
            ("MaxLoadPerPhase column contains non-numeric values", 0.7),
        ]

    def test_non_numeric_qualification_level(self) -> None:
        workers = [
            {
                "WorkerID": "W1",
                "WorkerName": "Ann",
                "Skills": "Go",
                "AvailableSlots": "1,2",
                "MaxLoadPerPhase": "2",
                "QualificationLevel": "senior",
            },
        ]

        findings = suggest_data_quality(workers, "workers")

        assert [(f.issue, f.auto_fix_available, f.confidence) for f in findings] == [
            ("QualificationLevel column contains non-numeric values", True, 0.7),
        ]

    def test_clean_tasks(self) -> None:
        tasks = [
            {"TaskID": "T1", "TaskName": "Build", "Duration": "2", "RequiredSkills": "Go", "MaxConcurrent": "1"},
        ]

        assert suggest_data_quality(tasks, "tasks") == []

    def test_blank_numeric_cells_are_not_non_numeric(self) -> None:
        tasks = [{"TaskID": "T1", "TaskName": "Build", "Duration": "", "RequiredSkills": "Go", "MaxConcurrent": ""}]

        findings = suggest_data_quality(tasks, "tasks")

        assert [f.issue for f in findings] == ["1 rows missing Duration"]

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnknownEntityKindError):
            suggest_data_quality([], "vendors")

    def test_check_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            NUMERIC_COLUMN_CHECKS[EntityKind.CLIENTS] = ()  # type: ignore[index]
        with pytest.raises(TypeError):
            CRITICAL_FIELDS[EntityKind.TASKS] = ()  # type: ignore[index]


# ---------------------------------------------------------------------------
# Rule templates
# ---------------------------------------------------------------------------


class TestRuleTemplates:
    @pytest.mark.parametrize(
        "description, rule_type, action",
        [
            ("Give HIGH PRIORITY clients the first pick", "priority", "allocate_first"),
            ("please balance the load", "load_balance", "distribute_evenly"),
            ("match each skill to a task", "skill_match", "assign_qualified_worker"),
            ("keep the team together", "group_allocation", "assign_within_group"),
            ("allocate by group", "group_allocation", "assign_within_group"),
        ],
    )
    def test_templates(self, description: str, rule_type: str, action: str) -> None:
        draft = natural_language_to_rule(description)

        assert draft.type == rule_type
        assert draft.action == action

    def test_first_template_wins(self) -> None:
        draft = natural_language_to_rule("high priority first, then balance load across the team")

        assert draft.to_dict() == {
            "type": "priority",
            "condition": "Client.PriorityLevel >= 4",
            "action": "allocate_first",
            "description": "Allocate high priority clients first",
        }

    def test_partial_keywords_fall_back_to_custom(self) -> None:
        draft = natural_language_to_rule("High priority clients only")

        assert draft.type == "custom"
        assert draft.condition == "true"
        assert draft.action == "manual_review"
        assert draft.description == "High priority clients only"


# ---------------------------------------------------------------------------
# Priority weights
# ---------------------------------------------------------------------------


class TestPriorityWeights:
    def test_defaults_total_one_hundred(self) -> None:
        assert total_weight(DEFAULT_CRITERIA) == 100
        assert is_balanced(DEFAULT_CRITERIA)

    @pytest.mark.parametrize(
        "preset, weights",
        [
            ("balanced", [25, 30, 20, 15, 10]),
            ("efficiency", [15, 40, 25, 10, 10]),
            ("fairness", [20, 25, 15, 30, 10]),
            ("Urgent", [30, 25, 15, 10, 20]),
        ],
    )
    def test_presets(self, preset: str, weights: list[int]) -> None:
        assert [criterion.weight for criterion in apply_preset(preset)] == weights

    def test_unknown_preset(self) -> None:
        with pytest.raises(UnknownPresetError):
            apply_preset("chaos")

    def test_set_weight_is_clamped(self) -> None:
        raised = set_weight(DEFAULT_CRITERIA, "worker-skills", 80)
        lowered = set_weight(DEFAULT_CRITERIA, "worker-skills", -5)

        assert raised[1].weight == 50
        assert lowered[1].weight == 0
        assert DEFAULT_CRITERIA[1].weight == 30

    def test_set_weight_unknown_criterion(self) -> None:
        with pytest.raises(UnknownCriterionError):
            set_weight(DEFAULT_CRITERIA, "cost", 10)

    def test_default_advice(self) -> None:
        assert weight_advice(DEFAULT_CRITERIA) == [
            "Skill matching weight of 25-35% typically yields best results"
        ]

    def test_advice_for_dominant_and_low_totals(self) -> None:
        dominant = set_weight(DEFAULT_CRITERIA, "worker-skills", 45)
        low = set_weight(DEFAULT_CRITERIA, "deadline-urgency", 0)

        assert weight_advice(dominant) == [
            "High single priority (>40%) may create allocation bottlenecks",
            "Skill matching weight of 25-35% typically yields best results",
        ]
        assert weight_advice(low)[0] == "Consider increasing weights to reach 100% for optimal allocation"
