[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exercisekit"
version = "0.1.0"
description = "Classic programming exercises: number puzzles, base conversions, sorting, searching, text, data structures, graphs, SHA-3 and tic-tac-toe."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "sha3",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[project.scripts]
exercisekit-sha3 = "exercisekit.sha3:main"
exercisekit-tictactoe = "exercisekit.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["exercisekit"]

[tool.hatch.build.targets.sdist]
include = ["exercisekit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
