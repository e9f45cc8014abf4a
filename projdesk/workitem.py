"""Shared pieces for work items: console I/O, date checks and the common record."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import ClassVar, TextIO

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_CHOICE_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")

KEEP_MARKER = "q"

# (attribute, label used in prompts)
_PROMPTED_FIELDS = (
    ("name", "name"),
    ("description", "description"),
    ("start_date", "start date (YYYY-MM-DD)"),
    ("end_date", "end date (YYYY-MM-DD)"),
    ("status", "status (e.g., Not Started/In Progress/Completed)"),
)


class Console:
    """Line-oriented text console over a pair of streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        """Write a line of text."""
        self._out.write(f"{text}\n")
        self._out.flush()

    def ask(self, prompt: str = "") -> str:
        """Write the prompt as given and read one line, without its newline.

        Raises EOFError when the input is exhausted.
        """
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        return line[:-1] if line.endswith("\n") else line

    def ask_choice(self, prompt: str = "") -> int | None:
        """Read a menu choice; returns None when the line holds no integer."""
        match = _CHOICE_PATTERN.match(self.ask(prompt))
        return int(match.group(1)) if match else None


def is_valid_date(date: str) -> bool:
    """Tell whether the text has the shape YYYY-MM-DD."""
    return _DATE_PATTERN.fullmatch(date) is not None


def keep_or_replace(current: str, answer: str) -> str:
    """Return the answer, or the current value when the answer is empty or 'q'."""
    if answer == KEEP_MARKER or not answer:
        return current
    return answer


@dataclass
class WorkItem:
    """A named piece of work with a date range and a status."""

    kind: ClassVar[str] = "Item"

    name: str = ""
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    status: str = "Not Started"

    def describe(self) -> str:
        """Text block listing the item's fields."""
        return "\n".join(
            [
                "",
                f"{self.kind} Information:",
                f"Name: {self.name}",
                f"Description: {self.description}",
                f"Start Date: {self.start_date}",
                f"End Date: {self.end_date}",
                f"Status: {self.status}",
            ]
        )

    @classmethod
    def _fields_from_prompt(cls, console: Console, noun: str) -> dict[str, str]:
        return {
            attr: console.ask(f"Enter {noun} {label}:\n")
            for attr, label in _PROMPTED_FIELDS
        }

    def _update_fields_from_prompt(self, console: Console, noun: str) -> None:
        for attr, label in _PROMPTED_FIELDS:
            answer = console.ask(
                f"Enter new {noun} {label} (or enter q to keep current value):\n"
            )
            setattr(self, attr, keep_or_replace(getattr(self, attr), answer))