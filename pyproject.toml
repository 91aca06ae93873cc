[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arithpack"
version = "0.1.0"
description = "A small multi-file archiver built on static arithmetic coding"
requires-python = ">=3.10"
dependencies = []
keywords = ["arithmetic coding", "compression", "archive", "entropy coding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arithpack = "arithpack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arithpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
