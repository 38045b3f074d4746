[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jnetwork"
version = "1.0.0"
description = "Small building blocks for a feed-forward neural network: matrices, neurons, layers and networks."
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "matrix", "neuron", "activation", "machine learning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jnetwork = "jnetwork.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jnetwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
