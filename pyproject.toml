[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lento"
version = "0.1.0"
description = "Core data model of the Lento language: a structural type system, operator definitions and an expression tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["language", "interpreter", "type-system", "ast", "operators"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lento"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
