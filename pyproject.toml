[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redtree"
version = "0.1.0"
description = "Left-leaning red-black tree of string keys with an interactive console, file indexing and timing tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "llrb", "binary search tree", "data structures", "word index"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
redtree = "redtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["redtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
