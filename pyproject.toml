[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slipfloor"
version = "0.1.0"
description = "A small top-down arcade ship duel on a slippery floor, built on pygame"
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slipfloor = "slipfloor.app:main"

[tool.hatch.build.targets.wheel]
packages = ["slipfloor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
