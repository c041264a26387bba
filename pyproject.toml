[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dummyc"
version = "0.1.0"
description = "Parser, syntax tree and symbol tables for DummyC, a tiny C-like language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "syntax tree", "symbol table", "c"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dummyc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
