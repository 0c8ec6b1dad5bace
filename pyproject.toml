[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corefx"
version = "0.1.0"
description = "A small 2D sprite game framework: fixed-timestep game loop, shaders, textures, sprite renderers and matrix helpers"
requires-python = ">=3.10"
keywords = ["game", "2d", "sprite", "opengl", "game-loop", "shader", "texture", "matrix"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["corefx"]

[tool.hatch.build.targets.sdist]
include = ["corefx", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
