[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sequekit"
version = "0.1.0"
description = "A growable sequence with sorted-set algebra, ordering and search helpers, canonical labelling under permutation groups and a typed registry of sequences."
requires-python = ">=3.10"
dependencies = []
keywords = ["sequence", "sorted sets", "permutations", "symmetry", "canonical form", "registry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sequekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
