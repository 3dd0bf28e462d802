"""
allocation_rules/priorities.py

Allocation priority criteria, their weights, and the named weight presets.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import List, Mapping, Sequence

MIN_WEIGHT = 0
MAX_WEIGHT = 50
TARGET_TOTAL_WEIGHT = 100
DOMINANT_WEIGHT = 40


class UnknownPresetError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown priority preset '{name}'. Allowed: {', '.join(PRESETS)}.")
        self.name = name


class UnknownCriterionError(ValueError):
    def __init__(self, criterion_id: str) -> None:
        super().__init__(f"Unknown priority criterion '{criterion_id}'.")
        self.criterion_id = criterion_id


@dataclass(frozen=True)
class PriorityCriterion:
    id: str
    name: str
    description: str
    weight: int


DEFAULT_CRITERIA: tuple[PriorityCriterion, ...] = (
    PriorityCriterion(
        id="client-priority",
        name="Client Priority Level",
        description="Higher priority clients get preferential allocation",
        weight=25,
    ),
    PriorityCriterion(
        id="worker-skills",
        name="Worker Skill Match",
        description="Match tasks to workers with relevant skills",
        weight=30,
    ),
    PriorityCriterion(
        id="task-duration",
        name="Task Duration",
        description="Consider task completion time in allocation",
        weight=20,
    ),
    PriorityCriterion(
        id="workload-balance",
        name="Workload Balance",
        description="Distribute work evenly across workers",
        weight=15,
    ),
    PriorityCriterion(
        id="deadline-urgency",
        name="Deadline Urgency",
        description="Prioritize tasks with tight deadlines",
        weight=10,
    ),
)

# Weights are positional against DEFAULT_CRITERIA.
PRESETS: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {
        "balanced": (25, 30, 20, 15, 10),
        "efficiency": (15, 40, 25, 10, 10),
        "fairness": (20, 25, 15, 30, 10),
        "urgent": (30, 25, 15, 10, 20),
    }
)


def _clamp(weight: int) -> int:
    return max(MIN_WEIGHT, min(MAX_WEIGHT, int(weight)))


def apply_preset(
    name: str,
    criteria: Sequence[PriorityCriterion] = DEFAULT_CRITERIA,
) -> tuple[PriorityCriterion, ...]:
    key = name.strip().lower()
    if key not in PRESETS:
        raise UnknownPresetError(name)
    weights = PRESETS[key]
    updated = []
    for index, criterion in enumerate(criteria):
        # Criteria beyond the preset's length keep their current weight.
        weight = weights[index] if index < len(weights) else criterion.weight
        updated.append(replace(criterion, weight=weight))
    return tuple(updated)


def set_weight(
    criteria: Sequence[PriorityCriterion],
    criterion_id: str,
    weight: int,
) -> tuple[PriorityCriterion, ...]:
    """Return a copy of ``criteria`` with one weight replaced, clamped to 0..50."""
    if not any(criterion.id == criterion_id for criterion in criteria):
        raise UnknownCriterionError(criterion_id)
    return tuple(
        replace(criterion, weight=_clamp(weight)) if criterion.id == criterion_id else criterion
        for criterion in criteria
    )


def total_weight(criteria: Sequence[PriorityCriterion]) -> int:
    return sum(criterion.weight for criterion in criteria)


def is_balanced(criteria: Sequence[PriorityCriterion]) -> bool:
    return total_weight(criteria) == TARGET_TOTAL_WEIGHT


def weight_advice(criteria: Sequence[PriorityCriterion]) -> List[str]:
    """
    Plain-language advice for a weight configuration.

    The skill-matching hint is always included last.
    """
    advice: List[str] = []
    if total_weight(criteria) < TARGET_TOTAL_WEIGHT:
        advice.append("Consider increasing weights to reach 100% for optimal allocation")
    if any(criterion.weight > DOMINANT_WEIGHT for criterion in criteria):
        advice.append("High single priority (>40%) may create allocation bottlenecks")
    advice.append("Skill matching weight of 25-35% typically yields best results")
    return advice
