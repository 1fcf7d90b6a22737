[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cordsearch"
version = "0.1.0"
description = "Incremental full-text indexing and ranked search over plain-text and CORD-19 JSON documents."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "inverted-index", "lexicon", "trie", "cord-19", "indexing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cordsearch = "cordsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cordsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
