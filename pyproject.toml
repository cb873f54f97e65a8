[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filerenamer"
version = "1.0.0"
description = "Batch file renamer with a desktop window: preview new names, then copy files to a destination folder."
requires-python = ">=3.10"
dependencies = []
keywords = ["rename", "batch", "files", "copy", "gui", "tkinter"]
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
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filerenamer = "filerenamer.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["filerenamer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
