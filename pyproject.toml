[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgvalues"
version = "0.1.0"
description = "Encode Python values as PostgreSQL literals and decode PostgreSQL text-format values back into Python."
requires-python = ">=3.10"
dependencies = []
keywords = ["postgresql", "sql", "hstore", "array", "jsonb", "bytea", "escaping", "literals"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pgvalues"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
