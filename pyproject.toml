[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailyarrays"
version = "0.1.0"
description = "Classic array problems: extrema, rearrangements, subarray sums and stock profits."
requires-python = ">=3.10"
dependencies = []
keywords = ["arrays", "algorithms", "kadane", "permutation", "majority", "stocks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dailyarrays = "dailyarrays.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dailyarrays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
