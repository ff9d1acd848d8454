[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bigfib"
version = "2.1"
description = "Compute large Fibonacci numbers with base-10^9 big integers and Karatsuba multiplication"
requires-python = ">=3.10"
dependencies = []
keywords = ["fibonacci", "bigint", "karatsuba", "arbitrary-precision", "fast-doubling"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bigfib = "bigfib.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bigfib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
