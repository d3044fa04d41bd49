[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deepspace"
version = "0.2.0"
description = "Spaceflight environment models: standard atmosphere, gravity, vessel damage, cabin emergencies and reentry heating."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "spaceflight",
    "simulation",
    "atmosphere",
    "reentry",
    "micrometeorite",
    "damage-model",
    "physics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["deepspace"]

[tool.hatch.build.targets.sdist]
include = ["deepspace", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
