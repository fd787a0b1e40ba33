[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gqlkit"
version = "0.1.0"
description = "GraphQL building blocks: query errors, the ID scalar, cache hints and sample resolvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphql", "resolver", "errors", "cache-control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["gqlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
