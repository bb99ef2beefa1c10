[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "penjadwal"
version = "0.1.0"
description = "Monthly hospital doctor shift scheduler with preference and weekly-limit tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "hospital", "roster", "shifts", "doctors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
penjadwal = "penjadwal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["penjadwal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
