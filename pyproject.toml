[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmode"
version = "0.1.0"
description = "Building blocks for evolving modular recurrent neural networks"
requires-python = ">=3.10"
keywords = ["neuroevolution", "recurrent neural network", "evolutionary robotics", "xsd"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nmode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
