[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpkit"
version = "0.1.0"
description = "Competitive programming toolkit: number theory, graphs, range-query structures and debug printing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "data-structures",
    "graphs",
    "number-theory",
    "segment-tree",
    "fenwick-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpkit = "cpkit.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["cpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
