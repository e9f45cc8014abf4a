# projdesk

A small interactive console program for keeping track of projects, the tasks
and subtasks inside them, and the team members who work on them.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
projdesk
```

The program prints "Project Management System Started" and shows the main
menu:

1. **Project Management**: add, modify, delete and list projects. A project
   has a name, description, start and end dates and a status (the prompts
   suggest `YYYY-MM-DD` dates and statuses such as `Not Started`,
   `In Progress` or `Completed`).
2. **Task Management**: enter a project name, then add, modify, delete and
   list its tasks. Option 5 opens the subtask menu of a task chosen by name,
   where subtasks can be added, edited, deleted and shown.
3. **Team Member Management**: enter a project name, then add, modify, delete
   and list its members (name, role, contact information).
0. **Exit Program**

Menu choices are read as whole numbers; anything else counts as an invalid
option. The program also stops when its input ends, and exits with status 130
on Ctrl-C. On leaving it prints "Project Management System Closed".

Names are unique within their list: a new project, task, subtask or member
whose name is already taken is refused.

When you modify a record, each field is asked for in turn. Enter `q`, or leave
the line empty, to keep the current value. Editing a subtask changes its
description, dates and status; its name stays as it is.

## Using it from Python

The menus read from and write to a `projdesk.workitem.Console`, which wraps
any pair of text streams (standard input and output by default). This makes
the program easy to script:

```python
import io
from projdesk.workitem import Console
from projdesk.cli import run

script = io.StringIO("0\n")
out = io.StringIO()
run(Console(script, out))
print(out.getvalue())
```

`projdesk.system.ProjectManagementSystem` holds the list of projects and offers
`project_menu()`, `task_menu()`, `team_member_menu()` and `get_project(name)`.

The records can also be used on their own:

```python
from projdesk.project import Project
from projdesk.task import Task
from projdesk.member import TeamMember

project = Project(name="Website")
project.add_task(Task(name="Design"))
project.add_team_member(TeamMember(name="Ana", role="Lead"))
print(project.describe())
```

`Project.add_task` and `Project.add_team_member` raise `ValueError` for a name
already in use; `remove_task`, `update_task`, `remove_team_member` and
`update_team_member` raise `KeyError` for a name that is not there.
`get_task`, `get_team_member` and `Task.get_subtask` return `None` when
nothing matches.

`projdesk.workitem.is_valid_date` checks that a string has the `YYYY-MM-DD`
shape, and `projdesk.workitem.keep_or_replace` applies the "`q` or empty keeps
the current value" rule.

## What it does not do

- Nothing is saved: all projects, tasks and members live in memory and are
  gone when the program ends. There is no import or export.
- Dates and statuses typed at the prompts are stored as entered; the menus do
  not check them with `is_valid_date` or against a fixed list of statuses.