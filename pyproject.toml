[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "devlife"
version = "0.1.0"
description = "A terminal board game about surviving a computer science degree and landing a career"
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "game", "terminal", "dice", "turn based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
devlife = "devlife.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["devlife"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
