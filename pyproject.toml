[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushswap"
version = "0.1.0"
description = "Sort integers using two stacks and a limited set of stack instructions"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "stacks", "algorithms", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pushswap = "pushswap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pushswap"]

[tool.pytest.ini_options]
addopts = "-ra"
