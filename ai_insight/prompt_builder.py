"""Prompt builder for allocation insight requests."""

from typing import Any, Mapping, Sequence, Tuple

from app.domain.records import cell_text

SYSTEM_PROMPT = (
    "You are an expert data analyst specializing in workforce management and task allocation.\n"
    "Analyze the provided data and respond to user queries with specific, actionable insights.\n"
    "Focus on matching workers to tasks based on skills, availability, and client priorities.\n"
    "Provide concrete recommendations with supporting data."
)

# (section title, ((label, field), ...)) in listing order.
_SECTIONS: Tuple[Tuple[str, Tuple[Tuple[str, str], ...]], ...] = (
    (
        "CLIENTS DATA",
        (
            ("ID", "ClientID"),
            ("Name", "ClientName"),
            ("Priority", "PriorityLevel"),
            ("Tasks", "RequestedTaskIDs"),
        ),
    ),
    (
        "WORKERS DATA",
        (
            ("ID", "WorkerID"),
            ("Name", "WorkerName"),
            ("Skills", "Skills"),
            ("Slots", "AvailableSlots"),
            ("Max Load", "MaxLoadPerPhase"),
            ("Group", "WorkerGroup"),
            ("Qualification", "QualificationLevel"),
        ),
    ),
    (
        "TASKS DATA",
        (
            ("ID", "TaskID"),
            ("Name", "TaskName"),
            ("Category", "Category"),
            ("Duration", "Duration"),
            ("Skills", "RequiredSkills"),
            ("Phases", "PreferredPhases"),
            ("Max Concurrent", "MaxConcurrent"),
        ),
    ),
)


class InsightPromptBuilder:
    """Builds the entity listing context and user message for an insight request.

    Each record becomes one ``Label: value`` line under its entity heading.
    Missing values are rendered as empty strings.
    """

    system_prompt = SYSTEM_PROMPT

    def build_context(
        self,
        clients: Sequence[Mapping[str, Any]],
        workers: Sequence[Mapping[str, Any]],
        tasks: Sequence[Mapping[str, Any]],
    ) -> str:
        """Format all three entity listings as one text block.

        Args:
            clients: Client records keyed by canonical field name.
            workers: Worker records keyed by canonical field name.
            tasks: Task records keyed by canonical field name.

        Returns:
            The CLIENTS / WORKERS / TASKS listing separated by blank lines.
        """
        parts = []
        for (title, columns), records in zip(_SECTIONS, (clients, workers, tasks)):
            lines = [self._format_record(record, columns) for record in records]
            parts.append(f"{title}:\n" + "\n".join(lines))
        return "\n\n".join(parts)

    def build_user_prompt(
        self,
        prompt: str,
        clients: Sequence[Mapping[str, Any]],
        workers: Sequence[Mapping[str, Any]],
        tasks: Sequence[Mapping[str, Any]],
    ) -> str:
        context = self.build_context(clients, workers, tasks)
        return (
            f"{context}\n\n"
            f"User Query: {prompt}\n\n"
            f"Please analyze this data and provide specific insights and recommendations."
        )

    @staticmethod
    def _format_record(
        record: Mapping[str, Any],
        columns: Tuple[Tuple[str, str], ...],
    ) -> str:
        return ", ".join(
            f"{label}: {cell_text(record.get(field)) or ''}" for label, field in columns
        )
