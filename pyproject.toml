[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tracktuner"
version = "0.1.0"
description = "A console MP3 folder player with playlist, loop, shuffle, seek and volume controls"
requires-python = ">=3.10"
keywords = ["mp3", "music", "player", "playlist", "audio", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players :: MP3",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tracktuner = "tracktuner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tracktuner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
