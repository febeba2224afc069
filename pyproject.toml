[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satisfactorio"
version = "0.1.0"
description = "Voxel world simulation core: chunked block storage, greedy meshing, camera, raycasting and frustum culling."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "chunk", "greedy-meshing", "raycast", "frustum-culling", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["satisfactorio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
