[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spiritflow"
version = "0.1.0"
description = "Event records, track kinematics, neutron-wall clusters and bootstrap statistics for heavy-ion flow analysis"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "physics",
    "nuclear physics",
    "heavy-ion collisions",
    "particle identification",
    "collective flow",
    "bootstrap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spiritflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
