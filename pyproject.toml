[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ventshutter"
version = "0.1.0"
description = "Cyclic controller for a motorised ventilation duct shutter with end-position sensors, timeouts and blinking status lights"
requires-python = ">=3.10"
dependencies = []
keywords = ["ventilation", "shutter", "motor", "state machine", "controller", "home automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ventshutter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
