[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liftseq"
version = "0.1.0"
description = "Microprogrammed elevator controller: a sequential network, a condition selector and a floor-by-floor simulator."
requires-python = ">=3.10"
dependencies = []
keywords = ["elevator", "state machine", "microprogram", "sequential network", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
liftseq = "liftseq.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["liftseq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
