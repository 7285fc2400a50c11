[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scaregames"
version = "0.1.0"
description = "Single- and double-elimination monster tournaments with Graphviz DOT bracket output"
requires-python = ">=3.10"
dependencies = []
keywords = ["tournament", "bracket", "double-elimination", "graphviz", "dot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
scaregames = "scaregames.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scaregames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
