[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordread"
version = "0.1.0"
description = "Split text files into words with line and column positions, and write colored HTML logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "words", "text", "html", "logging"]
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
    "Topic :: Text Processing :: General",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordread = "wordread.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordread"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
