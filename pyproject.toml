[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecsengine"
version = "1.0.0"
description = "A small entity-component-system 2D game engine with tile maps, sprite animation, collision and a following camera"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["ecs", "entity-component-system", "game-engine", "2d", "tilemap", "pygame"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ecsengine = "ecsengine.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["ecsengine"]

[tool.pytest.ini_options]
addopts = "-ra"
