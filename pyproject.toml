[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchrunner"
version = "0.1.0"
description = "A small task runner for validating and benchmarking functions against a baseline"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "timing", "task", "validation", "performance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
benchrunner = "benchrunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["benchrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
