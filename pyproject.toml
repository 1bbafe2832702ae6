[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameworld"
version = "0.1.0"
description = "Game-object toolkit: 2D sprites with motion, animation and box collisions, health bars, 3D vector and rotation helpers, and OBJ/MTL mesh loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "sprite", "collision", "obj", "mtl", "mesh", "animation", "vector"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gameworld"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
