"""Interactive console tool for projects, tasks, subtasks and team members."""

__version__ = "0.1.0"
__all__ = ["__version__"]