[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cairofuzz"
version = "0.1.0"
description = "Mutation-based fuzzer for Sierra programs and Starknet contracts"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fuzzing",
    "fuzzer",
    "cairo",
    "sierra",
    "starknet",
    "felt252",
    "property-based testing",
    "mutation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cairofuzz = "cairofuzz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cairofuzz"]

[tool.hatch.build.targets.sdist]
include = ["cairofuzz", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
