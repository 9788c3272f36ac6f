[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nvgui"
version = "0.1.0"
description = "Editor-side building blocks for a graphical Neovim front end: redraw event parsing, styles, cursor, character grids and event routing."
requires-python = ">=3.10"
dependencies = []
keywords = ["neovim", "nvim", "gui", "editor", "redraw", "ui"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nvgui"]

[tool.hatch.build.targets.sdist]
include = ["nvgui", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
