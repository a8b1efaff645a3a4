[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concertlang"
version = "0.1.0"
description = "Core of a small statement-based scripting language: tokenizer, typed variables, expression evaluation and library helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "language", "tokenizer", "expression-evaluation"]
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
packages = ["concertlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
