[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isaac"
version = "0.1.0"
description = "A small 2D game engine with game objects, components, scenes and simple rigid-body physics"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "physics", "pygame", "scene-graph"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
isaac-demo = "isaac.demo_scene:main"

[tool.hatch.build.targets.wheel]
packages = ["isaac"]

[tool.pytest.ini_options]
addopts = "-ra"
