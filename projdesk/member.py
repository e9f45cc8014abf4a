"""Team members."""

from __future__ import annotations

from dataclasses import dataclass

from .workitem import Console, keep_or_replace

_PROMPTED_FIELDS = (
    ("name", "name"),
    ("role", "role"),
    ("contact_info", "contact information"),
)


@dataclass
class TeamMember:
    """A person working on a project."""

    name: str = ""
    role: str = ""
    contact_info: str = ""

    @classmethod
    def from_prompt(cls, console: Console) -> TeamMember:
        """Build a member from answers read on the console."""
        member = cls(
            **{
                attr: console.ask(f"Enter team member {label}:\n")
                for attr, label in _PROMPTED_FIELDS
            }
        )
        console.say("Team member added successfully!")
        return member

    def update_from_prompt(self, console: Console) -> None:
        """Replace fields with answers, keeping those answered with 'q' or nothing."""
        for attr, label in _PROMPTED_FIELDS:
            answer = console.ask(
                f"Enter new team member {label} (or enter q to keep current value):\n"
            )
            setattr(self, attr, keep_or_replace(getattr(self, attr), answer))
        console.say("Team member information updated successfully.")

    def describe(self) -> str:
        """Text block listing the member's fields."""
        return "\n".join(
            [
                "",
                "Team Member Information:",
                f"Name: {self.name}",
                f"Role: {self.role}",
                f"Contact Info: {self.contact_info}",
            ]
        )