[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numtheory"
version = "0.1.0"
description = "Elementary number theory: primes, gcd, Chinese remainder theorem, Euler's totient and small modular groups"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "number theory",
    "primes",
    "sieve",
    "gcd",
    "chinese remainder theorem",
    "totient",
    "group theory",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["numtheory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
