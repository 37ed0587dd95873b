[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "darkweave"
version = "0.1.0"
description = "Softmax and route layers, character-RNN batching, grid detection decoding and poster scoring helpers for small neural networks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "neural-network",
    "softmax",
    "rnn",
    "yolo",
    "object-detection",
    "one-hot",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["darkweave"]

[tool.hatch.build.targets.sdist]
include = ["darkweave", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
