[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campusevents"
version = "0.1.0"
description = "University events, participants and registrations, with CPF and date validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["university", "events", "registration", "workshop", "lecture", "fair", "course", "cpf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["campusevents"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
