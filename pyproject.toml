[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ldnkit"
version = "0.1.0"
description = "Numeric vectors, integer arrays and matrices, strings, binary trees and linked lists with plain-text file I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "array", "linked-list", "tree", "bubble-sort", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ldnkit"]

[tool.pytest.ini_options]
addopts = "-ra"
