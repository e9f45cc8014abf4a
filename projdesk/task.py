"""Tasks and their subtasks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .workitem import Console, WorkItem, keep_or_replace


@dataclass
class Task(WorkItem):
    """A task that may hold uniquely named subtasks."""

    kind: ClassVar[str] = "Task"

    subtasks: list[Task] = field(default_factory=list)

    @classmethod
    def from_prompt(cls, console: Console) -> Task:
        """Build a task from answers read on the console."""
        task = cls(**cls._fields_from_prompt(console, "task"))
        console.say("Task added successfully!")
        return task

    def update_from_prompt(self, console: Console) -> None:
        """Replace fields with answers, keeping those answered with 'q' or nothing."""
        self._update_fields_from_prompt(console, "task")
        console.say("Task information updated successfully.")

    def describe(self) -> str:
        parts = [super().describe()]
        if self.subtasks:
            parts.append("Subtask List:")
            parts.extend(sub.describe() for sub in self.subtasks)
        return "\n".join(parts)

    def get_subtask(self, name: str) -> Task | None:
        """The subtask with this name, or None."""
        return next((sub for sub in self.subtasks if sub.name == name), None)

    def add_subtask(self, console: Console) -> Task | None:
        """Read a new subtask; returns it, or None if the name is taken."""
        name = console.ask("Enter subtask name:\n")
        if self.get_subtask(name) is not None:
            console.say(f' Subtask "{name}" already exists, addition failed.')
            return None
        description = console.ask("Enter subtask description:\n")
        start_date = console.ask("Enter subtask start date:\n")
        end_date = console.ask("Enter subtask end date:\n")
        status = console.ask("Enter subtask status:\n")
        sub = Task(name, description, start_date, end_date, status)
        self.subtasks.append(sub)
        console.say(f' Subtask "{name}" added successfully.')
        return sub

    def update_subtask(self, console: Console) -> Task | None:
        """Edit a subtask chosen by name; returns it, or None if not found."""
        name = console.ask("Enter the name of the subtask to update:\n")
        sub = self.get_subtask(name)
        if sub is None:
            console.say(f' Subtask named "{name}" not found.')
            return None
        for attr, label in (
            ("description", "description"),
            ("start_date", "start date"),
            ("end_date", "end date"),
            ("status", "status"),
        ):
            answer = console.ask(
                f"Current {label}: {getattr(sub, attr)}\n"
                f"Enter new {label} (or enter q to keep current value):\n"
            )
            setattr(sub, attr, keep_or_replace(getattr(sub, attr), answer))
        console.say(f' Subtask "{name}" updated.')
        return sub

    def remove_subtask(self, console: Console) -> Task | None:
        """Delete a subtask chosen by name; returns it, or None if not found."""
        name = console.ask("Enter the name of the subtask to delete:\n")
        sub = self.get_subtask(name)
        if sub is None:
            console.say(f' Subtask named "{name}" not found.')
            return None
        self.subtasks.remove(sub)
        console.say(f' Subtask "{name}" deleted.')
        return sub