[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motifscan"
version = "0.1.0"
description = "Build log-odds position weight matrices from transcription factor binding sites and scan promoter sequences for hits."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "motif",
    "position weight matrix",
    "log-odds",
    "promoter",
    "transcription factor",
    "fasta",
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
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
motifscan = "motifscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["motifscan"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
