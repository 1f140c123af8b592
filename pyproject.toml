[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mindmerp"
version = "0.5.0b0"
description = "A small desktop mind-mapping tool with its own compact binary map format."
requires-python = ">=3.10"
dependencies = []
keywords = ["mind map", "mindmap", "brainstorming", "diagram", "notes", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mindmerp = "mindmerp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mindmerp"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
