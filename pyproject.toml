[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparkfield"
version = "0.1.0"
description = "Emitter-driven 2D particle system with an interactive pygame demo"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["particles", "particle-system", "emitter", "perlin", "pygame", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sparkfield = "sparkfield.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sparkfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
