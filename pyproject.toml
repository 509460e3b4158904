[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aflscore"
version = "1.0.0"
description = "Interactive Australian rules football score calculator for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["afl", "football", "score", "calculator", "cli"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aflscore = "aflscore.tracker:main"

[tool.hatch.build.targets.wheel]
packages = ["aflscore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
