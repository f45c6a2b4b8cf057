[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobench"
version = "0.1.0"
description = "Classic algorithms on trees, arrays, sorting, dynamic programming, graphs, arithmetic and the n-queens puzzle."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "dynamic-programming",
    "sorting",
    "graphs",
    "n-queens",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["algobench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
