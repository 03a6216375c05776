[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xzkit"
version = "0.5.13"
description = "Building blocks for the xz container format, rolling hashes, GNU-style flag parsing and small build helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "xz",
    "lzma",
    "compression",
    "crc64",
    "uvarint",
    "rolling-hash",
    "command-line",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Build Tools",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xb-cat = "xzkit.xbcat:main"
xb-version-file = "xzkit.xbversionfile:main"

[tool.hatch.build.targets.wheel]
packages = ["xzkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
