[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamemaths"
version = "0.1.0"
description = "Vectors, matrices, ray colliders, interpolation, simplex noise and a free-fly camera for games and graphics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "vector",
    "matrix",
    "collision",
    "raycast",
    "bounding box",
    "simplex noise",
    "interpolation",
    "camera",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gamemaths-noise = "gamemaths.noise_testing:main"

[tool.hatch.build.targets.wheel]
packages = ["gamemaths"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
