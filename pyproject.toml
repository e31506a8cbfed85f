[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taverne"
version = "0.1.0"
description = "A small domain-driven design toolkit: customers, products, in-memory repositories and an order service for a tavern."
requires-python = ">=3.10"
dependencies = []
keywords = ["domain-driven-design", "ddd", "repository", "aggregate", "service"]
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
packages = ["taverne"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
