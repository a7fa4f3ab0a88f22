[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "Small, readable implementations of classic data structures and algorithms for study"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "recursion",
    "searching",
    "matrix",
    "polynomial",
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

[project.scripts]
algonotes = "algonotes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.pytest.ini_options]
addopts = "-ra"
