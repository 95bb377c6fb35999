[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchboard"
version = "1.1.0"
description = "Terminal browser and console reports for machine-learning experiment results stored as JSON files"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "machine-learning",
    "experiments",
    "results",
    "benchmark",
    "report",
    "terminal",
    "classification",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
benchboard = "benchboard.manage_screen:main"

[tool.hatch.build.targets.wheel]
packages = ["benchboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
