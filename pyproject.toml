[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockds"
version = "0.1.0"
description = "Memory managers, hierarchies and trees built from explicit memory blocks"
requires-python = ">=3.10"
keywords = ["data structures", "hierarchy", "tree", "memory manager", "sequence", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blockds"]

[tool.pytest.ini_options]
addopts = "-ra"
