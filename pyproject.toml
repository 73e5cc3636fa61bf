[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "balternary"
version = "0.1.0"
description = "Fixed-width balanced ternary integers with trit-level arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["balanced ternary", "ternary", "trit", "arithmetic", "number systems"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["balternary"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
