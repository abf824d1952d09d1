[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kon"
version = "0.1.0"
description = "Core building blocks of a small game engine: identifiers, strings, allocators, containers, math, reflection, paths and profiling."
requires-python = ">=3.10"
keywords = ["game-engine", "allocator", "containers", "hashmap", "red-black-tree", "math", "reflection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["kon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
