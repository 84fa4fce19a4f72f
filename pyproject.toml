[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pelabuhan-api"
version = "1.0.0"
description = "HTTP API server that serves countries, ports and goods fetched from an upstream API"
requires-python = ">=3.10"
keywords = ["ports", "harbour", "api", "flask", "proxy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "requests",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
pelabuhan-api = "pelabuhan_api.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pelabuhan_api"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
