[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starsyn"
version = "0.1.0"
description = "Lexical scanner, string quoting and syntax-tree nodes for the Starlark configuration language"
requires-python = ">=3.10"
dependencies = []
keywords = ["starlark", "scanner", "lexer", "tokenizer", "syntax", "ast", "bazel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["starsyn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
