[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacewar"
version = "0.1.0"
description = "A small top-down space game built on an entity-component design, with a menu scene and a play scene drawn with pygame"
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "entity-component-system", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spacewar = "spacewar.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spacewar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
