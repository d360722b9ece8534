[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vicore"
version = "0.1.0"
description = "Text-handling routines of a vi-style editor: insert input, motions, window geometry, registers, operators and printf formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["vi", "editor", "text", "motions", "registers", "undo", "printf"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vicore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
