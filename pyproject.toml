[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "citygraph"
version = "0.1.0"
description = "Manage cities and roads as a weighted directed graph, with path search and a Tk desktop interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "bfs", "dfs", "cities", "roads", "shortest-path", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
citygraph = "citygraph.gui:main"

[tool.setuptools.packages.find]
include = ["citygraph*"]

[tool.pytest.ini_options]
addopts = "-ra"
