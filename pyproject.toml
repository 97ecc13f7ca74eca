[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkrunner"
version = "0.1.0"
description = "A side-scrolling endless runner built from randomly chained map chunks"
requires-python = ">=3.10"
keywords = ["game", "runner", "platformer", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chunkrunner = "chunkrunner.game:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
