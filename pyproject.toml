[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitdecimal"
version = "0.1.0"
description = "A decimal type with a 96-bit mantissa, a power-of-ten scale and a sign bit, with arithmetic, comparison, rounding and conversion."
requires-python = ">=3.10"
dependencies = []
keywords = ["decimal", "fixed-point", "arithmetic", "96-bit", "rounding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitdecimal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
