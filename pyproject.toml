[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moodlog"
version = "0.1.0"
description = "A small mood diary: emoji-tagged notes stored in SQLite, with friendly relative dates and desktop notifications."
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["mood", "diary", "journal", "sqlite", "emoji", "notifications"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
moodlog = "moodlog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["moodlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
