[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslists"
version = "1.0.0"
description = "Singly and doubly linked lists of integers, with a stack and a queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "stack", "queue", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslists-demo = "dslists.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dslists"]

[tool.pytest.ini_options]
addopts = "-ra"
