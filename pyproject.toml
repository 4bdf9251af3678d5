[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "macroflow"
version = "0.1.0"
description = "Composable user macros: nested actions, conditionals, loops and timed delays driven by a manually advanced timer"
requires-python = ">=3.10"
dependencies = []
keywords = ["macro", "automation", "game", "scripting", "actions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["macroflow"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
