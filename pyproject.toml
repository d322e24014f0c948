[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dreamblocks"
version = "0.1.0"
description = "A falling-block puzzle game with SRS rotation, hold, ghost piece and 7-bag randomiser"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "falling blocks", "pygame", "srs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
dreamblocks = "dreamblocks.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dreamblocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
