[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cliparser"
version = "0.1.0"
description = "A friendly command-line parser with commands, subcommands, typed flags and coloured help output"
requires-python = ">=3.10"
keywords = ["cli", "parser", "terminal", "command-line", "flags"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cliparser-example = "cliparser.example:main"

[tool.hatch.build.targets.wheel]
packages = ["cliparser"]

[tool.hatch.build.targets.sdist]
include = ["cliparser", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
