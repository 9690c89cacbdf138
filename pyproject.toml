[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ntfskit"
version = "0.1.0"
description = "Parsing of NTFS on-disk structures from bytes: records, B-tree indexes, attribute values and timestamps"
requires-python = ">=3.10"
dependencies = []
keywords = ["ntfs", "filesystem", "forensics", "index", "b-tree", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ntfskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
