[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gymmy"
version = "0.1.0"
description = "Console tool for managing gym members and coaches"
requires-python = ">=3.10"
keywords = ["gym", "membership", "coaches", "console", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gymmy = "gymmy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gymmy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
