[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vpinlink"
version = "0.6.1"
description = "Device-side toolkit for virtual-pin IoT cloud clients: parameter encoding, command dispatch, pin handlers, widgets and NTP time"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "iot",
    "virtual-pin",
    "home-automation",
    "device",
    "ntp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: Internet",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vpinlink"]

[tool.hatch.build.targets.sdist]
include = ["vpinlink", "tests", "README.md", "pyproject.toml"]

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
