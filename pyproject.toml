[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storm"
version = "0.1.0"
description = "Engine core for small games: colors, asset loading, audio mixing, input events and an update loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "audio", "mixer", "events", "colors"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["storm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
