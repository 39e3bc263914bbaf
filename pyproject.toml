[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linhvm"
version = "0.1.0"
description = "Runtime core of the Linh language: values, bytecode, conversions, arithmetic and built-in packages"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "bytecode", "virtual-machine", "linh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linhvm"]

[tool.pytest.ini_options]
addopts = "-ra"
