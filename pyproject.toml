[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodekit"
version = "0.1.0"
description = "Event emitters, observers, path helpers, console output, file and filesystem utilities, and HTTP message handling in one small toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["events", "observer", "path", "console", "filesystem", "http", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nodekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
