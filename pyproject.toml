[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syncr"
version = "0.1.0"
description = "Mirror the regular files of one directory into another, comparing checksums, sizes, times and permissions"
requires-python = ">=3.10"
dependencies = []
keywords = ["sync", "mirror", "directory", "checksum", "sha256"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Mirroring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
syncr = "syncr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["syncr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
