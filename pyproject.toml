[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpkit"
version = "0.1.0"
description = "Dynamic programming solvers and number-theory helpers for combinatorial counting problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "combinatorics",
    "modular arithmetic",
    "segment tree",
    "binary lifting",
    "digit dp",
    "bitmask dp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dpkit = "dpkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
