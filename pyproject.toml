[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psuuid"
version = "0.1.0"
description = "A 16-byte UUID value with strict parsing, canonical formatting, Gregorian tick helpers, pure-Python MD5/SHA-1 and JSON serialization."
requires-python = ">=3.10"
dependencies = []
keywords = ["uuid", "guid", "identifier", "md5", "sha1", "rfc4122", "json"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["psuuid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
