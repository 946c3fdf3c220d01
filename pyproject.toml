[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bots2d"
version = "0.1.0"
description = "Robot models for a 2D top-view robotics simulator: DC wheel motors, speed telemetry and line-follower paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "simulation", "line follower", "dc motor", "telemetry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bots2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
