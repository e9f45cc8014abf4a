"""Command-line entry point with the main menu."""

from __future__ import annotations

import argparse

from .system import ProjectManagementSystem
from .workitem import Console


def run(console: Console | None = None) -> None:
    """Show the main menu until the user exits or the input ends."""
    console = console if console is not None else Console()
    with ProjectManagementSystem(console) as pms:
        try:
            while True:
                console.say("\n=== Main Menu ===")
                console.say("1. Project Management")
                console.say("2. Task Management")
                console.say("3. Team Member Management")
                console.say("0. Exit Program")
                match console.ask_choice("Please select: "):
                    case 1:
                        pms.project_menu()
                    case 2:
                        pms.task_menu()
                    case 3:
                        pms.team_member_menu()
                    case 0:
                        console.say("Goodbye!")
                        return
                    case _:
                        console.say("Invalid option")
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive project manager on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="projdesk", description="Interactive project, task and team manager."
    )
    parser.parse_args(argv)
    try:
        run(Console())
    except KeyboardInterrupt:
        return 130
    return 0