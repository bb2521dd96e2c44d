[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logdrift"
version = "0.1.0"
description = "Composable log-stream stages for merging lines from several services and spotting lines that drift from what has been seen before."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "logging",
    "logs",
    "drift",
    "pipeline",
    "filter",
    "ansi",
    "stream",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["logdrift"]

[tool.hatch.build.targets.sdist]
include = [
    "logdrift",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
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
ignore_missing_imports = true
