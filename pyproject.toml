[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "partisanvm"
version = "0.1.0"
description = "Simulations and quasi-stationary distributions for the partisan voter model"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "voter model",
    "partisan",
    "zealots",
    "gillespie",
    "quasi-stationary",
    "stochastic simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["partisanvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
