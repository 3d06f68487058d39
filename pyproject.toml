[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpparts"
version = "1.3.1"
description = "Strict parsers for URI components: schemes, ports, paths and queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "uri", "url", "scheme", "path", "query", "parsing"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["httpparts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
