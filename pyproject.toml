[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "castcaper"
version = "0.1.0"
description = "Engine pieces for a small party-based dungeon crawler: framebuffer drawing, keyboard state, title screen and turn-based combat rules."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "rpg",
    "dungeon-crawler",
    "turn-based",
    "framebuffer",
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["castcaper"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
