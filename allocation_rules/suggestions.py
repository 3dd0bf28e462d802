"""
allocation_rules/suggestions.py

Deterministic, rule-based allocation rule suggestions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

from app.config import HeuristicSettings, get_heuristic_settings
from app.domain.records import Record, cell_text, parse_number, split_list


@dataclass(frozen=True)
class RuleSuggestion:
    """
    A recommended allocation rule and the statistic that triggered it.
    """

    message: str
    statistic: str
    value: float
    threshold: float

    @property
    def trigger(self) -> str:
        return f"{self.statistic} = {self.value:g} (threshold {self.threshold:g})"


# ---------------------------------------------------------------------------
# Aggregate statistics
# ---------------------------------------------------------------------------

def high_priority_ratio(clients: Sequence[Record], level: float) -> float:
    """Fraction of all clients whose PriorityLevel is at or above ``level``."""
    if not clients:
        return 0.0
    high = count_where(clients, "PriorityLevel", lambda value: value >= level)
    return high / len(clients)


def mean_slot_count(workers: Sequence[Record]) -> float:
    """Mean number of listed available slots per worker (unparsable counts as 0)."""
    if not workers:
        return 0.0
    total = 0
    for worker in workers:
        slots = split_list(worker.get("AvailableSlots"))
        if all(parse_number(slot) is not None for slot in slots):
            total += len(slots)
    return total / len(workers)


def distinct_values(records: Sequence[Record], field: str) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for record in records:
        text = cell_text(record.get(field))
        if text and text.strip():
            seen.setdefault(text.strip(), None)
    return tuple(seen)


def count_where(
    records: Sequence[Record],
    field: str,
    predicate: Callable[[float], bool],
) -> int:
    count = 0
    for record in records:
        number = parse_number(record.get(field))
        if number is not None and predicate(number):
            count += 1
    return count


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def suggest_rule_details(
    clients: Sequence[Record],
    workers: Sequence[Record],
    tasks: Sequence[Record],
    *,
    settings: HeuristicSettings | None = None,
) -> List[RuleSuggestion]:
    """
    Evaluate the fixed suggestion rules against aggregate statistics.

    Rules evaluated (in order)
    --------------------------
    1. Priority allocation  - share of clients at or above the high-priority
       level exceeds the configured ratio (0.3).
    2. Load balancing       - mean available-slot count lies in (0, 20).
    3. Group allocation     - more than one distinct WorkerGroup.
    4. Phase windows        - any task Duration above 3.
    5. Concurrency          - any task MaxConcurrent above 1.

    An empty entity list never triggers the rules that read it.
    """
    resolved = settings or get_heuristic_settings()
    suggestions: List[RuleSuggestion] = []

    if clients:
        ratio = high_priority_ratio(clients, resolved.high_priority_level)
        if ratio > resolved.high_priority_ratio:
            suggestions.append(
                RuleSuggestion(
                    message=(
                        "Consider adding priority-based allocation rules for high-priority clients "
                        f"(e.g., Client Priority Level >= {resolved.high_priority_level})."
                    ),
                    statistic="high_priority_client_ratio",
                    value=ratio,
                    threshold=resolved.high_priority_ratio,
                )
            )

    if workers:
        mean_slots = mean_slot_count(workers)
        if 0 < mean_slots < resolved.limited_slots_mean:
            suggestions.append(
                RuleSuggestion(
                    message=(
                        "Workers have limited available slots - consider workload balancing rules "
                        "based on AvailableSlots."
                    ),
                    statistic="mean_available_slots",
                    value=mean_slots,
                    threshold=resolved.limited_slots_mean,
                )
            )

        groups = distinct_values(workers, "WorkerGroup")
        if len(groups) > 1:
            suggestions.append(
                RuleSuggestion(
                    message=(
                        "Multiple worker groups detected - consider group-based allocation rules "
                        "(e.g., WorkerGroup 'Sales' can only do 'Sales' tasks)."
                    ),
                    statistic="distinct_worker_groups",
                    value=len(groups),
                    threshold=1,
                )
            )

    if tasks:
        long_tasks = count_where(tasks, "Duration", lambda value: value > resolved.long_task_duration)
        if long_tasks > 0:
            suggestions.append(
                RuleSuggestion(
                    message=(
                        "Long-duration tasks detected - consider phase-window constraints "
                        "or sequential allocation."
                    ),
                    statistic="long_duration_tasks",
                    value=long_tasks,
                    threshold=0,
                )
            )

        concurrent_tasks = count_where(tasks, "MaxConcurrent", lambda value: value > 1)
        if concurrent_tasks > 0:
            suggestions.append(
                RuleSuggestion(
                    message=(
                        "Tasks with concurrent execution limits detected - optimize parallel "
                        "processing (e.g., MaxConcurrent for specific tasks)."
                    ),
                    statistic="concurrent_tasks",
                    value=concurrent_tasks,
                    threshold=0,
                )
            )

    return suggestions


def suggest_rules(
    clients: Sequence[Record],
    workers: Sequence[Record],
    tasks: Sequence[Record],
    *,
    settings: HeuristicSettings | None = None,
) -> List[str]:
    """Return the suggestion messages only."""
    return [
        suggestion.message
        for suggestion in suggest_rule_details(clients, workers, tasks, settings=settings)
    ]
