"""Interactive menus over a collection of projects."""

from __future__ import annotations

from typing import Iterable

from .member import TeamMember
from .project import Project
from .task import Task
from .workitem import Console

_OPTION_PROMPT = "Please select an option: "


class ProjectManagementSystem:
    """Holds projects and drives the menus that edit them."""

    def __init__(self, console: Console | None = None):
        self.console = console if console is not None else Console()
        self.projects: list[Project] = []
        self.console.say("Project Management System Started")

    def __enter__(self) -> ProjectManagementSystem:
        return self

    def __exit__(self, *exc_info) -> None:
        self.console.say("Project Management System Closed")

    def get_project(self, name: str) -> Project | None:
        """The project with this name, or None."""
        return next((p for p in self.projects if p.name == name), None)

    def _choose(
        self, title: str, options: Iterable[str], prompt: str = _OPTION_PROMPT
    ) -> int | None:
        self.console.say(f"\n=== {title} ===")
        for option in options:
            self.console.say(option)
        return self.console.ask_choice(prompt)

    def project_menu(self) -> None:
        """Add, modify, delete and list projects until the user goes back."""
        console = self.console
        while True:
            choice = self._choose(
                "Project Management",
                (
                    "1. Add Project",
                    "2. Modify Project",
                    "3. Delete Project",
                    "4. Display All Projects",
                    "0. Return to Main Menu",
                ),
            )
            match choice:
                case 0:
                    return
                case 1:
                    project = Project.from_prompt(console)
                    if self.get_project(project.name) is None:
                        self.projects.append(project)
                        console.say(" Project added successfully!")
                    else:
                        console.say(" Project with same name already exists!")
                case 2:
                    name = console.ask("Enter project name to modify: ")
                    project = self.get_project(name)
                    if project is None:
                        console.say(f' Project "{name}" not found!')
                    else:
                        project.update_from_prompt(console)
                case 3:
                    name = console.ask("Enter project name to delete: ")
                    project = self.get_project(name)
                    if project is None:
                        console.say(f' Project "{name}" not found.')
                    else:
                        self.projects.remove(project)
                        console.say(f' Project "{name}" deleted successfully.')
                case 4:
                    for project in self.projects:
                        console.say(project.describe())
                        console.say("----------------------")
                case _:
                    console.say(" Invalid option!")

    def task_menu(self) -> None:
        """Manage the tasks of a project chosen by name."""
        console = self.console
        pname = console.ask("Enter project name: ")
        project = self.get_project(pname)
        if project is None:
            console.say(" Project does not exist, cannot manage tasks.")
            return
        while True:
            choice = self._choose(
                f"Task Management (Project: {pname})",
                (
                    "1. Add Task",
                    "2. Modify Task",
                    "3. Delete Task",
                    "4. Display Task List",
                    "5. Manage Subtasks",
                    "0. Return to Previous Menu",
                ),
            )
            match choice:
                case 0:
                    return
                case 1:
                    task = Task.from_prompt(console)
                    if project.get_task(task.name) is None:
                        project.add_task(task)
                    else:
                        console.say(" Task with same name already exists.")
                case 2:
                    task = project.get_task(console.ask("Enter task name to modify: "))
                    if task is None:
                        console.say(" Task not found.")
                    else:
                        task.update_from_prompt(console)
                case 3:
                    try:
                        project.remove_task(console.ask("Enter task name to delete: "))
                    except KeyError:
                        console.say(" Delete failed, task does not exist.")
                case 4:
                    for task in project.tasks:
                        console.say(task.describe())
                        console.say("----------------")
                case 5:
                    task = project.get_task(
                        console.ask(
                            "Please enter the task name to manage its subtasks: "
                        )
                    )
                    if task is None:
                        console.say("Task not found!")
                    else:
                        self._subtask_menu(task)
                case _:
                    console.say(" Invalid option")

    def _subtask_menu(self, task: Task) -> None:
        console = self.console
        while True:
            choice = self._choose(
                f"Subtask Management (Task: {task.name})",
                (
                    "1. Add Subtask",
                    "2. Edit Subtask",
                    "3. Delete Subtask",
                    "4. Show All Subtasks",
                    "0. Return to Previous Menu",
                ),
                "Please select: ",
            )
            match choice:
                case 0:
                    return
                case 1:
                    task.add_subtask(console)
                case 2:
                    task.update_subtask(console)
                case 3:
                    task.remove_subtask(console)
                case 4:
                    console.say(task.describe())
                case _:
                    console.say("Invalid option")

    def team_member_menu(self) -> None:
        """Manage the team members of a project chosen by name."""
        console = self.console
        pname = console.ask("Enter project name: ")
        project = self.get_project(pname)
        if project is None:
            console.say(" Project does not exist, cannot manage team members.")
            return
        while True:
            choice = self._choose(
                f"Team Member Management (Project: {pname})",
                (
                    "1. Add Member",
                    "2. Modify Member",
                    "3. Delete Member",
                    "4. Display Member List",
                    "0. Return to Previous Menu",
                ),
            )
            match choice:
                case 0:
                    return
                case 1:
                    member = TeamMember.from_prompt(console)
                    if project.get_team_member(member.name) is None:
                        project.add_team_member(member)
                    else:
                        console.say(" Member with same name already exists.")
                case 2:
                    member = project.get_team_member(
                        console.ask("Enter member name to modify: ")
                    )
                    if member is None:
                        console.say(" Member not found.")
                    else:
                        member.update_from_prompt(console)
                case 3:
                    try:
                        project.remove_team_member(
                            console.ask("Enter member name to delete: ")
                        )
                    except KeyError:
                        console.say(" Delete failed, member does not exist.")
                case 4:
                    for member in project.team_members:
                        console.say(member.describe())
                        console.say("----------------")
                case _:
                    console.say(" Invalid option")