[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contabanco"
version = "0.1.0"
description = "Terminal bank account and movement manager with binary record files"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "ledger", "terminal", "transfers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contabanco = "contabanco.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contabanco"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
