[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rigidscene"
version = "1.0.0"
description = "2D composite rigid bodies, shape colliders, collision checks and a JSON model loader"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "rigid body", "collision", "aabb", "2d", "scene", "json"]
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
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rigidscene = "rigidscene.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["rigidscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
