[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "igniterest"
version = "0.1.0"
description = "A small client for the Apache Ignite REST API: caches, key/value access and SQL queries."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["ignite", "apache-ignite", "rest", "cache", "sql", "client"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
test = [
    "pytest",
    "responses",
]

[project.scripts]
igniterest-demo = "igniterest.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["igniterest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
