[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ichigo"
version = "0.1.0"
description = "A small 2.5D game engine core: voxel geometry, a component tree, collision, animation and draw ordering."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "game-engine",
    "voxel",
    "geometry",
    "spline",
    "rational",
    "draw-order",
    "collision",
]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["ichigo"]

[tool.hatch.build.targets.sdist]
include = [
    "ichigo",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
