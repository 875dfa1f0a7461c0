[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libraryd"
version = "0.1.0"
description = "A small file-backed library catalog and loan tracker with librarian and patron command-line tools"
requires-python = ">=3.10"
keywords = ["library", "catalog", "loans", "books", "cli"]
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
library-librarian = "libraryd.librarian:main"
library-patron = "libraryd.patron:main"

[tool.hatch.build.targets.wheel]
packages = ["libraryd"]

[tool.pytest.ini_options]
addopts = "-ra"
