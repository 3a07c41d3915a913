[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ordercontainer"
version = "0.1.0"
description = "A growable container that can be walked in insertion, reverse, ascending, descending, side-cross and middle-out order"
requires-python = ">=3.10"
dependencies = []
keywords = ["container", "iteration", "ordering", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ordercontainer-demo = "ordercontainer.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["ordercontainer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
