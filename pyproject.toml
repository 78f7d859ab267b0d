[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlist"
version = "0.1.0"
description = "Hierarchical netlist model of cells, terminals, nets and instances, with XML load and save"
requires-python = ">=3.10"
dependencies = []
keywords = ["netlist", "eda", "cells", "xml", "circuit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlist = "netlist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["netlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
