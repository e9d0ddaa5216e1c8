[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unrarmini"
version = "0.1.0"
description = "Building blocks of a minimal RAR unpacker: byte readers, hashes, path and volume name helpers, time conversion and standard filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["rar", "unrar", "archive", "decompression", "sha1", "sha256", "filters"]
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
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unrarmini"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
