[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clrsalgo"
version = "0.1.0"
description = "Classic textbook algorithms and data structures: graphs, heaps, trees, sorting, hashing and dynamic programming"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graph",
    "shortest-path",
    "maximum-flow",
    "fibonacci-heap",
    "binomial-heap",
    "disjoint-set",
    "sorting",
    "hashing",
    "dynamic-programming",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clrsalgo-shuffle = "clrsalgo.shuffle:main"
clrsalgo-knapsack = "clrsalgo.knapsack:main"
clrsalgo-align = "clrsalgo.alignment:main"

[tool.hatch.build.targets.wheel]
packages = ["clrsalgo"]

[tool.pytest.ini_options]
addopts = "-ra"
