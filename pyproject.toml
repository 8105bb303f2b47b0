[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relambda"
version = "0.0.1"
description = "Compile a small lambda-calculus language with definitions into SKI combinators and Unlambda."
requires-python = ">=3.10"
dependencies = []
keywords = ["lambda calculus", "unlambda", "combinators", "ski", "compiler", "bracket abstraction"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
relambda = "relambda.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["relambda"]

[tool.pytest.ini_options]
addopts = "-ra"
