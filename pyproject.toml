[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixops"
version = "0.1.0"
description = "Composable operations on bounded integer square matrices: identity, transpose, scaling, addition, subtraction and composition."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "square matrix", "transpose", "composition", "operations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
packages = ["matrixops"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
