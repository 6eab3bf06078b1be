[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tronkit"
version = "0.1.0"
description = "TRON address encoding, ABI parameter packing, wallet input parsing and a small command line"
requires-python = ">=3.10"
keywords = ["tron", "trx", "trc10", "abi", "base58", "blockchain", "wallet"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pycryptodome",
    "pyyaml",
    "python-dateutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tronkit = "tronkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tronkit"]

[tool.hatch.build.targets.sdist]
include = ["tronkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
