[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estudos"
version = "0.1.0"
description = "Graph algorithms, metabolic network analysis, trie dictionary search and knapsack exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "metabolic network", "dijkstra", "trie", "levenshtein", "knapsack"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estudos-metabolic = "estudos.metabolic:main"
estudos-graph = "estudos.graph_cli:main"
estudos-dictionary = "estudos.dictionary:main"
estudos-knapsack = "estudos.knapsack:main"

[tool.hatch.build.targets.wheel]
packages = ["estudos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
