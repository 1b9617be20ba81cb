[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vectorsketch"
version = "0.1.0"
description = "A small Tk vector drawing editor for lines, rectangles, ellipses, stars and text, with undo and redo"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "drawing", "editor", "shapes", "undo", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vectorsketch = "vectorsketch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vectorsketch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
