[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlab"
version = "1.0.0"
description = "Signal lines, block-type catalogue and drawing geometry for real-time control block diagrams"
requires-python = ">=3.10"
dependencies = []
keywords = ["block diagram", "control", "real-time", "geometry", "routing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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

[tool.hatch.build.targets.wheel]
packages = ["xlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
