[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpsubmit"
version = "0.1.0"
description = "Core building blocks for a game submission service: activity events, roles, constants, errors and environment configuration."
requires-python = ">=3.10"
dependencies = []
keywords = ["submissions", "activity-events", "roles", "configuration", "curation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fpsubmit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
