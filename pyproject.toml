[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typedheaders"
version = "0.1.0"
description = "Typed parsing and encoding of common HTTP header fields"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "headers", "cors", "cache-control", "etag", "websocket", "cookie"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["typedheaders"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
