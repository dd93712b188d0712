[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scratchnet"
version = "0.1.0"
description = "A small dense neural network built from first principles, with worked examples and a random-search optimizer."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["neural network", "dense layer", "softmax", "relu", "cross-entropy", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scratchnet-demos = "scratchnet.demos:main"
scratchnet-dense = "scratchnet.dense_demo:main"
scratchnet-optimize = "scratchnet.optimization:main"

[tool.hatch.build.targets.wheel]
packages = ["scratchnet"]

[tool.pytest.ini_options]
addopts = "-ra"
