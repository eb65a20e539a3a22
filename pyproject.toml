[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chproto"
version = "0.1.0"
description = "Building blocks of the ClickHouse native protocol: column types, type-name parsing, protocol codes, queries and UUID columns"
requires-python = ">=3.10"
dependencies = []
keywords = ["clickhouse", "database", "native-protocol", "columns", "types"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
