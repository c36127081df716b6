[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cashdesk"
version = "0.1.0"
description = "A console cash register: cashier shifts, receipts and a CSV product catalogue, driven by a command script or an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["cash register", "point of sale", "receipt", "shift", "retail", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cashdesk = "cashdesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cashdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
