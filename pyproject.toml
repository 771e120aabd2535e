[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gqlcore"
version = "0.1.0"
description = "GraphQL query errors, ID and Map scalars, cache hints and sample resolvers"
requires-python = ">=3.10"
keywords = ["graphql", "resolvers", "errors", "cache-control", "scalars"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gqlcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
