[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latren"
version = "0.1.0"
description = "Core building blocks of a small game engine: entity-component system, resource paths and managers, CFG data model, deserialization and frame timing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game-engine",
    "entity-component-system",
    "resources",
    "serialization",
    "frustum-culling",
    "texture-atlas",
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["latren"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
