[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "projdesk"
version = "0.1.0"
description = "Interactive console tool for keeping track of projects, tasks, subtasks and team members"
requires-python = ">=3.10"
dependencies = []
keywords = ["project management", "tasks", "subtasks", "team", "console", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
projdesk = "projdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["projdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
