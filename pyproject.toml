[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "expirycache"
version = "0.1.0"
description = "A thread-safe in-memory key/value cache with per-item expiration and background cleanup."
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "ttl", "expiration", "in-memory", "thread-safe"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
expirycache-demo = "expirycache.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["expirycache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
