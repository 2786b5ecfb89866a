[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockapi"
version = "0.1.0"
description = "Data types, filter arguments and version helpers for the container engine HTTP API"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "engine-api", "filters", "api-types", "seccomp"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dockapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
