[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "featweight"
version = "0.1.0"
description = "Feature weighting for 1-NN classification: RELIEF, local search, genetic and memetic algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "feature weighting",
    "nearest neighbour",
    "metaheuristics",
    "genetic algorithm",
    "memetic algorithm",
    "local search",
    "relief",
    "arff",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
featweight = "featweight.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["featweight"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
