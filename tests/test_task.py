import io

from projdesk.task import Task
from projdesk.workitem import Console


def make_console(*lines):
    out = io.StringIO()
    return Console(io.StringIO("".join(f"{line}\n" for line in lines)), out), out


def test_from_prompt_reads_all_fields():
    console, out = make_console("Build", "Write code", "2024-01-01", "2024-02-01", "In Progress")
    task = Task.from_prompt(console)
    assert task == Task("Build", "Write code", "2024-01-01", "2024-02-01", "In Progress")
    assert task.subtasks == []
    assert "Task added successfully!" in out.getvalue()
    assert "Enter task name:" in out.getvalue()


def test_default_status():
    assert Task("x").status == "Not Started"


def test_update_keeps_q_and_blank_answers():
    task = Task("a", "b", "c", "d", "e")
    console, out = make_console("q", "", "new start", "q", "Completed")
    task.update_from_prompt(console)
    assert (task.name, task.description, task.start_date, task.end_date, task.status) == (
        "a", "b", "new start", "d", "Completed",
    )
    assert "Task information updated successfully." in out.getvalue()


def test_update_can_rename():
    task = Task("a")
    console, _ = make_console("b", "q", "q", "q", "q")
    task.update_from_prompt(console)
    assert task.name == "b"


def test_add_and_get_subtask():
    task = Task("parent")
    console, out = make_console("child", "desc", "s", "e", "st")
    sub = task.add_subtask(console)
    assert sub == Task("child", "desc", "s", "e", "st")
    assert task.get_subtask("child") is sub
    assert task.get_subtask("missing") is None
    assert "added successfully" in out.getvalue()


def test_add_duplicate_subtask_reads_only_the_name():
    task = Task("parent", subtasks=[Task("child")])
    console, out = make_console("child", "leftover")
    assert task.add_subtask(console) is None
    assert len(task.subtasks) == 1
    assert "already exists" in out.getvalue()
    assert console.ask() == "leftover"


def test_update_subtask_keeps_name_and_replaces_fields():
    task = Task("parent", subtasks=[Task("child", "old", "s0", "e0", "st0")])
    console, out = make_console("child", "new desc", "q", "", "Completed")
    sub = task.update_subtask(console)
    assert sub is task.get_subtask("child")
    assert (sub.description, sub.start_date, sub.end_date, sub.status) == (
        "new desc", "s0", "e0", "Completed",
    )
    assert "Current description: old" in out.getvalue()


def test_update_missing_subtask():
    task = Task("parent")
    console, out = make_console("ghost")
    assert task.update_subtask(console) is None
    assert "not found" in out.getvalue()


def test_remove_subtask():
    keep, drop = Task("keep"), Task("drop")
    task = Task("parent", subtasks=[keep, drop])
    console, out = make_console("drop")
    assert task.remove_subtask(console) is drop
    assert task.subtasks == [keep]
    assert "deleted" in out.getvalue()


def test_remove_missing_subtask():
    task = Task("parent", subtasks=[Task("keep")])
    console, _ = make_console("ghost")
    assert task.remove_subtask(console) is None
    assert len(task.subtasks) == 1


def test_describe_without_subtasks():
    text = Task("solo", "d").describe()
    assert "Task Information:" in text
    assert "solo" in text
    assert "Subtask List:" not in text


def test_describe_with_subtasks_lists_them_after_header():
    task = Task("parent", subtasks=[Task("first"), Task("second")])
    text = task.describe()
    assert text.startswith(Task("parent").describe())
    header = text.index("Subtask List:")
    assert header < text.index("first") < text.index("second")
    assert text.count("Task Information:") == 3