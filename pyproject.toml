[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlderive"
version = "0.1.0"
description = "Uniform SQL connection interface with composable filter, order and pagination clauses"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "sqlite", "query-builder", "filter", "database"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqlderive"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
