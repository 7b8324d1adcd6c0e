[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kpaths"
version = "1.0.0"
description = "K shortest loopless paths (Yen's algorithm) over weighted directed graphs, with a small TCP query server and client"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "shortest-path", "yen", "dijkstra", "k-shortest-paths", "tcp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
kpaths-server = "kpaths.server:main"
kpaths-client = "kpaths.client:main"

[tool.hatch.build.targets.wheel]
packages = ["kpaths"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
