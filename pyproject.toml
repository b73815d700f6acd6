[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kqed"
version = "0.14.0"
description = "Position-space QED kernel assembly and symmetrisation for the hadronic light-by-light contribution to the muon g-2"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["qed", "kernel", "muon", "g-2", "light-by-light", "lattice", "chebyshev"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["kqed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
