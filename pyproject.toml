[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsmeta"
version = "0.1.0"
description = "Per-field file metadata and its rendering for ls-style directory listings"
requires-python = ">=3.10"
dependencies = [
    "humanize",
]
keywords = ["ls", "filesystem", "metadata", "permissions", "listing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lsmeta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
