[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marcort"
version = "0.1.0"
description = "Runtime support for compiled equation-based models: built-in math, array functions, power, printing, options and memory pools"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["runtime", "simulation", "equation-based models", "arrays", "numerics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["marcort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
