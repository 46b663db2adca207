[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "farsa"
version = "0.1.0"
description = "Building blocks for a fast reduced-space algorithm for group-sparse optimization: vectors with cached norms, output reporting, exceptions and strategy interfaces."
requires-python = ">=3.10"
dependencies = []
keywords = ["optimization", "reduced-space", "group sparsity", "vector", "line search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
packages = ["farsa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
