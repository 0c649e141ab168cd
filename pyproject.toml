[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scriptrender"
version = "0.1.0"
description = "Render shell-script templates from a directory with a per-renderer cache"
requires-python = ">=3.10"
keywords = ["templates", "bash", "user-data", "infrastructure", "jinja2"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: System :: Installation/Setup",
]
dependencies = ["jinja2"]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scriptrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
