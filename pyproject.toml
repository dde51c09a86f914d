[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnd5e"
version = "0.2.0"
description = "D&D 5e types and common mechanics"
requires-python = ">=3.10"
dependencies = []
keywords = ["dnd", "dungeons-and-dragons", "5e", "rpg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dnd5e"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
