[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tactisim"
version = "0.1.0"
description = "A mini tactical simulator: a tile map with selectable units that move on command."
requires-python = ">=3.10"
keywords = ["game", "tactics", "simulation", "pygame", "tile map", "real-time strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tactisim = "tactisim.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tactisim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
