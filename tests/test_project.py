import io

import pytest

from projdesk.member import TeamMember
from projdesk.project import Project
from projdesk.task import Task
from projdesk.workitem import Console


def _session(*lines):
    out = io.StringIO()
    return Console(io.StringIO("".join(f"{line}\n" for line in lines)), out), out


def test_default_status():
    assert Project("Alpha").status == "Not Started"


def test_add_and_get_task():
    project = Project("Alpha")
    task = Task("Build")
    project.add_task(task)
    assert project.get_task("Build") is task
    assert project.get_task("Missing") is None


def test_add_duplicate_task_raises():
    project = Project("Alpha")
    project.add_task(Task("Build"))
    with pytest.raises(ValueError):
        project.add_task(Task("Build", "other"))
    assert len(project.tasks) == 1


def test_remove_task():
    project = Project("Alpha", tasks=[Task("Build"), Task("Ship")])
    removed = project.remove_task("Build")
    assert removed.name == "Build"
    assert [t.name for t in project.tasks] == ["Ship"]


def test_remove_missing_task_raises():
    with pytest.raises(KeyError):
        Project("Alpha").remove_task("Build")


def test_update_task_replaces_in_place():
    project = Project("Alpha", tasks=[Task("Build"), Task("Ship")])
    project.update_task("Build", Task("Compile", "c"))
    assert [t.name for t in project.tasks] == ["Compile", "Ship"]
    assert project.get_task("Compile").description == "c"


def test_update_missing_task_raises():
    with pytest.raises(KeyError):
        Project("Alpha").update_task("Build", Task("X"))


def test_team_member_lifecycle():
    project = Project("Alpha")
    ann = TeamMember("Ann", "dev", "ann@example.com")
    project.add_team_member(ann)
    assert project.get_team_member("Ann") is ann
    with pytest.raises(ValueError):
        project.add_team_member(TeamMember("Ann"))
    project.update_team_member("Ann", TeamMember("Ann", "lead"))
    assert project.get_team_member("Ann").role == "lead"
    assert project.remove_team_member("Ann").role == "lead"
    assert project.team_members == []


def test_missing_team_member_errors():
    project = Project("Alpha")
    with pytest.raises(KeyError):
        project.remove_team_member("Bob")
    with pytest.raises(KeyError):
        project.update_team_member("Bob", TeamMember("Bob"))
    assert project.get_team_member("Bob") is None


def test_from_prompt_reads_fields():
    console, out = _session("Alpha", "desc", "2024-01-01", "2024-02-01", "In Progress")
    project = Project.from_prompt(console)
    assert project == Project("Alpha", "desc", "2024-01-01", "2024-02-01", "In Progress")
    assert "Enter project name:" in out.getvalue()


def test_update_from_prompt_keeps_q_and_empty():
    project = Project("Alpha", "desc", "2024-01-01", "2024-02-01", "Open")
    console, out = _session("Beta", "q", "", "2024-03-01", "Completed")
    project.update_from_prompt(console)
    assert (project.name, project.description, project.start_date) == (
        "Beta",
        "desc",
        "2024-01-01",
    )
    assert (project.end_date, project.status) == ("2024-03-01", "Completed")
    assert "Project information updated successfully." in out.getvalue()


def test_describe_lists_tasks_before_members():
    project = Project(
        "Alpha",
        tasks=[Task("Build")],
        team_members=[TeamMember("Ann")],
    )
    text = project.describe()
    assert "Project Information:" in text
    assert text.index("Task List:") < text.index("Task Information:")
    assert text.index("Task Information:") < text.index("Team Members:")
    assert text.index("Team Members:") < text.index("Team Member Information:")
    assert Task("Build").describe() in text