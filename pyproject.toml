[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airtype"
version = "0.1.0"
description = "Game logic for a networked side-scrolling shooter: wire protocol, entity-component store, sprite state and key bindings"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shmup", "ecs", "entity-component-system", "protocol", "sprites"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["airtype"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
