[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sidescroller"
version = "0.1.0"
description = "A small side-scrolling shooter with an animated player, sprinting and bullets."
requires-python = ">=3.10"
keywords = ["game", "pygame", "side-scroller", "arcade", "shooter"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
sidescroller = "sidescroller.application:main"

[tool.hatch.build.targets.wheel]
packages = ["sidescroller"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
