[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fantasmagorie"
version = "0.1.0"
description = "Animation primitives for user interfaces: easing curves, keyframe timelines, spring physics and animation groups"
requires-python = ">=3.10"
dependencies = []
keywords = ["animation", "easing", "keyframe", "spring", "tween", "timeline", "ui"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fantasmagorie"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
