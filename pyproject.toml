[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foodbank"
version = "0.1.0"
description = "Terminal tool for tracking food-bank donors, recipients, donations and food requests"
requires-python = ">=3.10"
dependencies = []
keywords = ["food bank", "donations", "charity", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
foodbank = "foodbank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["foodbank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
