[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reveltools"
version = "0.1.0"
description = "Collections, concurrency helpers and probability distributions in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "collections",
    "priority-queue",
    "stack",
    "queue",
    "set",
    "json",
    "rate-limiter",
    "worker-pool",
    "barrier",
    "distributions",
    "statistics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reveltools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
