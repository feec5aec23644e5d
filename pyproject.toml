[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caco3"
version = "0.1.0"
description = "Small building blocks for services: loose boolean settings, TOML lookups, durations, RFC 3339 times, JSON API envelopes, SQL clean-up and build information."
requires-python = ">=3.11"
dependencies = []
keywords = ["configuration", "toml", "duration", "json", "rfc3339", "timezone", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["caco3"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
