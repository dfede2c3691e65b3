[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordhash"
version = "0.1.0"
description = "Fixed-size string hash sets and maps with chaining, linear probing or double hashing, plus trie autocomplete, edit-distance autocorrect and KMP phrase detection."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash table",
    "open addressing",
    "trie",
    "autocomplete",
    "autocorrect",
    "edit distance",
    "kmp",
    "plagiarism",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordhash = "wordhash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordhash"]

[tool.pytest.ini_options]
addopts = "-ra"
