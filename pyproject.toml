[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radioyield"
version = "0.1.0"
description = "Water radiolysis species, dissociation channels and radiochemical yield (G value) plots"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = [
    "radiolysis",
    "radiation chemistry",
    "G value",
    "LET",
    "water dissociation",
    "molecular species",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
radioyield = "radioyield.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["radioyield"]

[tool.pytest.ini_options]
addopts = "-ra"
