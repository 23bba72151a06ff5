[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enviread"
version = "0.1.0"
description = "Record, field, string and byte-order helpers for ENVISAT product data"
requires-python = ">=3.10"
dependencies = []
keywords = ["envisat", "meris", "aatsr", "asar", "remote-sensing", "endianness", "byte-swap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swpeo = "enviread.swpeo:main"

[tool.hatch.build.targets.wheel]
packages = ["enviread"]

[tool.pytest.ini_options]
addopts = "-ra"
