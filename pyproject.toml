[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodrills"
version = "0.1.0"
description = "Classic algorithm and data-structure routines: arrays, strings, hashing, linked lists, trees, tries, graphs and backtracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "exercises", "trie", "binary-tree", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algodrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
