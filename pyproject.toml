[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prawn"
version = "0.1.0"
description = "Token definitions, parser and tree-walking interpreter for the small Prawn scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "parser", "ast", "scripting-language", "tokens"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
packages = ["prawn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
