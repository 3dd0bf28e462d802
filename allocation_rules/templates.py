"""
allocation_rules/templates.py

Closed keyword classifier mapping a rule description to a canned rule draft.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RuleDraft:
    type: str
    condition: str
    action: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "condition": self.condition,
            "action": self.action,
            "description": self.description,
        }


@dataclass(frozen=True)
class RuleTemplate:
    """
    A canned rule selected when every keyword group has a hit.

    Each entry of ``keyword_groups`` is a tuple of alternatives; the template
    applies when every group has at least one alternative in the description.
    """

    keyword_groups: tuple[tuple[str, ...], ...]
    draft: RuleDraft

    def applies_to(self, description: str) -> bool:
        return all(
            any(keyword in description for keyword in group)
            for group in self.keyword_groups
        )


# Checked top to bottom; the first applicable template wins.
RULE_TEMPLATES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        keyword_groups=(("high priority",), ("first",)),
        draft=RuleDraft(
            type="priority",
            condition="Client.PriorityLevel >= 4",
            action="allocate_first",
            description="Allocate high priority clients first",
        ),
    ),
    RuleTemplate(
        keyword_groups=(("balance",), ("load",)),
        draft=RuleDraft(
            type="load_balance",
            condition="Worker.AvailableSlots > 0",
            action="distribute_evenly",
            description="Balance workload across available workers",
        ),
    ),
    RuleTemplate(
        keyword_groups=(("skill",), ("match",)),
        draft=RuleDraft(
            type="skill_match",
            condition="Task.RequiredSkills IN Worker.Skills",
            action="assign_qualified_worker",
            description="Match tasks to workers with required skills",
        ),
    ),
    RuleTemplate(
        keyword_groups=(("group", "team"),),
        draft=RuleDraft(
            type="group_allocation",
            condition='Worker.WorkerGroup = "SpecificGroup"',
            action="assign_within_group",
            description="Allocate tasks within specific worker groups",
        ),
    ),
)


def natural_language_to_rule(description: str) -> RuleDraft:
    """
    Map a free-text rule description to one of the canned templates.

    Falls back to a custom rule flagged for manual review that carries the
    original description.
    """

    lowered = description.lower()
    for template in RULE_TEMPLATES:
        if template.applies_to(lowered):
            return template.draft
    return RuleDraft(
        type="custom",
        condition="true",
        action="manual_review",
        description=description,
    )
