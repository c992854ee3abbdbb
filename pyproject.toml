[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kvlog"
version = "0.4.27"
description = "Structured key-value data for log records: keys, typed values, sources and visitors"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "structured-logging", "key-value"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kvlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
