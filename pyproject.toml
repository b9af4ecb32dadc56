[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bjim"
version = "0.3.0"
description = "Bullet-journal style manager for Markdown journals: task migration and periodic collections"
requires-python = ">=3.11"
keywords = ["bullet journal", "markdown", "journal", "tasks", "migration", "daily log"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "pyyaml>=6.0",
    "tomli-w>=1.0",
    "platformdirs>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
bjim = "bjim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bjim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
