[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritesheet_anim"
version = "2.1.0"
description = "Frame selection, clips, easing, markers and playback state for spritesheet-based sprite animation"
requires-python = ">=3.10"
dependencies = []
keywords = ["sprite", "spritesheet", "animation", "easing", "texture atlas", "game development"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spritesheet_anim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
