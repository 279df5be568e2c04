[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bevymove"
version = "0.1.0"
description = "A small 2D game: boot screen, main menu and a circle you move with the arrow keys."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "2d", "pygame", "movement", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bevymove = "bevymove.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bevymove"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
