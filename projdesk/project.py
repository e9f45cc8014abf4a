"""Projects with their tasks and team members."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

from .member import TeamMember
from .task import Task
from .workitem import Console, WorkItem

_Named = TypeVar("_Named", Task, TeamMember)


def _find(items: list[_Named], name: str) -> _Named | None:
    return next((item for item in items if item.name == name), None)


def _position(items: list[_Named], name: str, what: str) -> int:
    for position, item in enumerate(items):
        if item.name == name:
            return position
    raise KeyError(f"{what} {name!r} not found")


@dataclass
class Project(WorkItem):
    """A project holding uniquely named tasks and team members."""

    kind: ClassVar[str] = "Project"

    tasks: list[Task] = field(default_factory=list)
    team_members: list[TeamMember] = field(default_factory=list)

    @classmethod
    def from_prompt(cls, console: Console) -> Project:
        """Build a project from answers read on the console."""
        return cls(**cls._fields_from_prompt(console, "project"))

    def update_from_prompt(self, console: Console) -> None:
        """Replace fields with answers, keeping those answered with 'q' or nothing."""
        self._update_fields_from_prompt(console, "project")
        console.say("Project information updated successfully.")

    def describe(self) -> str:
        lines = [super().describe(), "", "Task List:"]
        lines.extend(task.describe() for task in self.tasks)
        lines.extend(["", "Team Members:"])
        lines.extend(member.describe() for member in self.team_members)
        return "\n".join(lines)

    def add_task(self, task: Task) -> None:
        """Append a task; raises ValueError if its name is already used."""
        if self.get_task(task.name) is not None:
            raise ValueError(f"task {task.name!r} already exists")
        self.tasks.append(task)

    def remove_task(self, name: str) -> Task:
        """Remove and return the named task; raises KeyError if absent."""
        return self.tasks.pop(_position(self.tasks, name, "task"))

    def update_task(self, name: str, new_task: Task) -> None:
        """Put new_task in place of the named task; raises KeyError if absent."""
        self.tasks[_position(self.tasks, name, "task")] = new_task

    def get_task(self, name: str) -> Task | None:
        """The task with this name, or None."""
        return _find(self.tasks, name)

    def add_team_member(self, member: TeamMember) -> None:
        """Append a member; raises ValueError if the name is already used."""
        if self.get_team_member(member.name) is not None:
            raise ValueError(f"team member {member.name!r} already exists")
        self.team_members.append(member)

    def remove_team_member(self, name: str) -> TeamMember:
        """Remove and return the named member; raises KeyError if absent."""
        return self.team_members.pop(
            _position(self.team_members, name, "team member")
        )

    def update_team_member(self, name: str, new_member: TeamMember) -> None:
        """Put new_member in place of the named member; raises KeyError if absent."""
        self.team_members[_position(self.team_members, name, "team member")] = (
            new_member
        )

    def get_team_member(self, name: str) -> TeamMember | None:
        """The team member with this name, or None."""
        return _find(self.team_members, name)