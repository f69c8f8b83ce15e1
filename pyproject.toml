[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "copager"
version = "0.3.2"
description = "Composable front-end toolkit: declare tokens and BNF rules, lex with regular expressions, analyse grammars and build IRs from parse events."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "parser",
    "lexer",
    "grammar",
    "bnf",
    "first-set",
    "follow-set",
    "director-set",
    "concrete-syntax-tree",
    "s-expression",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["copager"]

[tool.hatch.build.targets.sdist]
include = ["copager", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
