[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabtools"
version = "0.1.0"
description = "Small system tools: integer file deduplication, a write-latency benchmark and a timing command shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "io", "latency", "deduplication", "shell", "fsync"]
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
    "Topic :: System :: Benchmark",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dedup = "oslabtools.dedup:main"
io-lat-write = "oslabtools.io_lat_write:main"
oslab-shell = "oslabtools.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabtools"]

[tool.pytest.ini_options]
addopts = "-ra"
