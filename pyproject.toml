[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpusched"
version = "0.1.0"
description = "A small CPU scheduling simulator: round robin, priority round robin, priority with aging, and earliest deadline first."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "cpu",
    "round-robin",
    "edf",
    "aging",
    "operating-systems",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpusched = "cpusched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpusched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
