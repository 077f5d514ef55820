[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teachos"
version = "0.1.0"
description = "A small teaching operating-system toolkit: bitmaps, lists, hash tables, stacks and a flat file system on a simulated disk"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "education",
    "file-system",
    "bitmap",
    "linked-list",
    "hash-table",
    "simulated-disk",
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
teachos-stack = "teachos.stacks:main"
teachos-templatestack = "teachos.templatestack:main"

[tool.hatch.build.targets.wheel]
packages = ["teachos"]

[tool.hatch.build.targets.sdist]
include = ["teachos", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
