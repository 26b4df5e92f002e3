[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numethods"
version = "0.1.0"
description = "Classic numerical methods: root finding, interpolation, quadrature, ODEs, linear systems and elliptic PDEs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "bisection",
    "secant",
    "interpolation",
    "quadrature",
    "romberg",
    "runge-kutta",
    "gauss-elimination",
    "lu-decomposition",
    "laplace",
    "poisson",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
numethods = "numethods.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numethods"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
