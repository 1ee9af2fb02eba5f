[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sensorlog"
version = "0.1.0"
description = "Split, search and generate timestamped sensor measurement logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensor", "measurements", "timestamp", "log", "time series"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sensorlog-split = "sensorlog.splitter:main"
sensorlog-lookup = "sensorlog.lookup:main"
sensorlog-generate = "sensorlog.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["sensorlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
